"""Game entry point"""

from zombie_typer.game import main

if __name__ == "__main__":
    main()
