import sys

from tictactoe_solo.app import main

if __name__ == '__main__':
    sys.exit(main())
