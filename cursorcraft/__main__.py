from cursorcraft.cli import main

main()
