# coding: utf-8

#---------------------------------------------------------------------------------------
# (C)2023 Robert Woodhead. Creative Commons Attribution License
#---------------------------------------------------------------------------------------

import sys

from .cli import main

# Main level.

if __name__ == '__main__':

    sys.exit(main())
