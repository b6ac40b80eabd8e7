from errorpages.cli import main

main()
