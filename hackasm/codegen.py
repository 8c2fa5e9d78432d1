# coding: utf-8

#---------------------------------------------------------------------------------------
# (C)2023 Robert Woodhead. Creative Commons Attribution License
#---------------------------------------------------------------------------------------

# Generate the 16-bit word for an Instruction. If we actually get to this
# point, the instruction has no syntax errors and every symbol it could
# mention has been bound.

from .errors import AddressOverflowError, AssemblyError
from .parser import Instruction, Kind, is_constant
from .symbols import SymbolTable
from .tables import CINSTR, COMP_BITS, DEST_BITS, JUMP_BITS, MAXCONSTANT


def codegen(o: Instruction, symbols: SymbolTable) -> str:

    match o.kind:

        case Kind.ADDRESS:  # @-Instruction
            if is_constant(o.symbol):
                av = int(o.symbol)
            else:
                av = symbols.lookup(o.symbol, o)
            if not 0 <= av <= MAXCONSTANT:
                raise AddressOverflowError(f'@{o.symbol} = {av} does not fit in 15 bits', o.line_number, o.text)
            code = av

        case Kind.COMPUTE:  # C-Instruction
            code = CINSTR + (COMP_BITS[o.comp] << 6)
            if o.dest is not None:
                code += DEST_BITS[o.dest] << 3
            if o.jump is not None:
                code += JUMP_BITS[o.jump]

        case other:
            raise AssemblyError(f'No code is generated for {other.value} instructions', o.line_number, o.text)

    return '{:016b}'.format(code)
