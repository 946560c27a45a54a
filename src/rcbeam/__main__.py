from rcbeam.cli import main

main()
