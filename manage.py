"""
This is the main file to run the game.
It imports the main function from the grid_invaders package and runs it.
"""

from grid_invaders.app import main

if __name__ == "__main__":
    main()
