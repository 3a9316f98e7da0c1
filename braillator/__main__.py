from braillator.cli import main

main()
