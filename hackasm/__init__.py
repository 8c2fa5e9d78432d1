# coding: utf-8

#---------------------------------------------------------------------------------------
# (C)2023 Robert Woodhead. Creative Commons Attribution License
#---------------------------------------------------------------------------------------

# Two-pass assembler for the HACK computer.

from .assembler import Assembly, assemble, assemble_lines, emit
from .codegen import codegen
from .errors import (AddressOverflowError, AssemblyError, MalformedInstructionError,
                     ResolutionOrderError, UndefinedSymbolError, UnknownMnemonicError)
from .parser import Instruction, Kind, parse, parse_lines, preprocess
from .symbols import SymbolTable
from .tables import Comp, Dest, Jump
