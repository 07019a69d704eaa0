from sprout.cli.cli import main

main()
