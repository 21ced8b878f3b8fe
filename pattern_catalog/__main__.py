from pattern_catalog.cli.main import main

main()
