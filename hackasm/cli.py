# coding: utf-8

#---------------------------------------------------------------------------------------
# (C)2023 Robert Woodhead. Creative Commons Attribution License
#---------------------------------------------------------------------------------------

# Usage: python3 -m hackasm [-s] [-d] [-o output] {asm input file}
#
# Generates a .hack output file named after the input file, in the current
# directory; if -s switch is used, some handy symbol tables are produced.

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .assembler import assemble_lines
from .errors import AssemblyError
from .symbols import print_symbol_tables
from .tables import MAXRAM, MAXROM


# Output goes in the current directory, named after the input minus its .asm suffix.

def output_name(fname: str) -> str:

    name = Path(fname).name
    if name.endswith('.asm'):
        return name[:-4] + '.hack'
    return Path(fname).stem + '.hack'

# Assemble a file and write the results. Returns the process exit code.

def avengers_assemble(fname: str, oname: str, print_symbol_table: bool) -> int:

    try:
        with open(fname, encoding='utf-8') as asmfile:
            lines = asmfile.readlines()
    except (OSError, UnicodeDecodeError) as oops:
        print(f'Error: cannot read [{fname}]: {oops}')
        return 1

    try:
        result = assemble_lines(lines)
    except AssemblyError as oops:
        print(oops)
        if oops.text:
            print('\t' + oops.text.strip('\n'))
        print('Assembly aborted.')
        return 1

    if print_symbol_table:
        print_symbol_tables(result.symbols)

    # Never leave a half-written .hack file behind.

    try:
        with open(oname, 'w') as hackfile:
            hackfile.write(result.text())
    except OSError as oops:
        print(f'Error: cannot write [{oname}]: {oops}')
        if os.path.isfile(oname):
            os.remove(oname)
        return 1

    pc = result.program_length
    ram = result.ram_usage

    print(f'Program length: {pc} (of {MAXROM}, {int(pc*100/MAXROM)}%), RAM usage: {ram} (of {MAXRAM}, {int(ram*100/MAXRAM)}%)')
    print('Assembly successful - results written to ' + oname)

    return 0


def main(argv: Optional[List[str]] = None) -> int:

    parser = argparse.ArgumentParser(
                    prog = 'hackasm',
                    description = 'Assembles HACK programs',
                    epilog = 'Results are stored in a .hack file with the same name as the .asm file, in the current directory')

    parser.add_argument('filename', help='The HACK .asm file to be assembled')
    parser.add_argument('-s', '--symbols', action='store_true', required=False, help='prints helpful symbol tables')
    parser.add_argument('-d', '--debug', action='store_true', required=False, help='logs each stage of assembly to stderr')
    parser.add_argument('-o', '--output', required=False, help='write the results here instead')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format='%(levelname)s - %(name)s - %(message)s',
        stream=sys.stderr)

    if not os.path.isfile(args.filename):
        print(f'Error: Input file [{args.filename}] does not exist')
        return 1

    return avengers_assemble(args.filename, args.output or output_name(args.filename), args.symbols)
