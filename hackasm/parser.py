# coding: utf-8

#---------------------------------------------------------------------------------------
# (C)2023 Robert Woodhead. Creative Commons Attribution License
#---------------------------------------------------------------------------------------

# Turning source lines into Instructions.
#
# Each raw line is first squashed (comments and all whitespace removed), which
# makes parsing MUCH easier. What is left is one of three shapes:
#
#   @value              A-instruction (value is a decimal constant or a symbol)
#   (LABEL)             L pseudo-instruction (marks a jump target)
#   dest=comp;jump      C-instruction (dest= and ;jump are each optional)
#
# C-instructions are split on the = and ; delimiters, and every field is
# checked against its closed vocabulary right here, so anything that gets
# past the parser is known to be encodable.

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Type, TypeVar

from .errors import MalformedInstructionError, UnknownMnemonicError
from .tables import DECIMALCHARS, MAXCONSTANT, SYMBOLCHARS, Comp, Dest, Jump

logger = logging.getLogger(__name__)

COMMENT = '//'

Mnemonic = TypeVar('Mnemonic', Dest, Comp, Jump)


class Kind(Enum):

    ADDRESS = 'Address'
    COMPUTE = 'Compute'
    LABEL = 'Label'
    INVALID = 'Invalid'     # blank or comment-only line


@dataclass
class Instruction:

    kind: Kind
    line_number: int = 0            # 1-based line in the source file
    text: str = ''                  # original (unmunged) line, for error reports
    symbol: Optional[str] = None
    dest: Optional[Dest] = None
    comp: Optional[Comp] = None
    jump: Optional[Jump] = None
    address_index: Optional[int] = None

    @property
    def occupies_memory(self) -> bool:

        return self.kind in (Kind.ADDRESS, Kind.COMPUTE)


# Determine if a string meets the criteria for a symbol.

def is_symbol(s:str) -> bool:

    if s == '':
        return False
    elif s[0] in DECIMALCHARS:
        return False
    else:
        for c in s:
            if c not in SYMBOLCHARS:
                return False

    return True

# Determine if a string is a decimal constant.

def is_constant(s:str) -> bool:

    return s != '' and all(c in DECIMALCHARS for c in s)

# Strip comments and whitespace from a raw line. Returns None if nothing
# is left (blank line or a line that is all comment).

def preprocess(line: str) -> Optional[str]:

    line = line.strip()

    if line.startswith(COMMENT):
        return None

    line = line.split(COMMENT, 1)[0]

    # Kill all the whitespace (evil trick).

    line = ''.join(line.split())

    return line if line != '' else None

# Look up a mnemonic in one of the closed vocabularies.

def mnemonic(vocabulary: Type[Mnemonic], s: str, what: str, line_number: int, text: str) -> Mnemonic:

    try:
        return vocabulary(s)
    except ValueError:
        raise UnknownMnemonicError(f'Unknown {what} [{s}]', line_number, text) from None

# Parse a squashed instruction string into an Instruction. The address_index
# is filled in later by parse_lines(), which knows where we are in the program.

def parse(o: str, line_number: int = 0, text: str = '') -> Instruction:

    text = text or o

    def malformed(reason: str) -> MalformedInstructionError:
        return MalformedInstructionError(reason, line_number, text)

    if o == '':
        raise malformed('Empty instruction')

    # Handle each of the possible statement types.

    if o[0] == '@':             # @-op
        s = o[1:]
        if s == '':
            raise malformed('Missing value after @')
        elif is_constant(s):
            if int(s) > MAXCONSTANT:
                raise malformed(f'@ constant out of 0..{MAXCONSTANT} range')
        elif not is_symbol(s):
            raise malformed('@ value is not a symbol or decimal constant')
        return Instruction(Kind.ADDRESS, line_number, text, symbol=s)

    elif o[0] == '(':           # (LABEL)
        if len(o) < 2 or not o.endswith(')'):
            raise malformed('Label definition does not end in )')
        name = o[1:-1]
        if name == '':
            raise malformed('Empty symbol')
        elif not is_symbol(name):
            raise malformed(f'Badly formed symbol [{name}]')
        return Instruction(Kind.LABEL, line_number, text, symbol=name)

    # C-operation: dest=comp;jump

    olist = o.split(';')
    if len(olist) > 2:
        raise malformed('Multiple ;''s in operation')

    jump = None
    if len(olist) == 2:
        if olist[1] == '':
            raise malformed('Missing jump after ;')
        jump = mnemonic(Jump, olist[1], 'jump', line_number, text)

    olist = olist[0].split('=')
    if len(olist) > 2:
        raise malformed('Multiple =''s in operation')

    dest = None
    if len(olist) == 2:
        if olist[0] == '':
            raise malformed('Missing destination before =')
        dest = mnemonic(Dest, olist[0], 'destination', line_number, text)

    if olist[-1] == '':
        raise malformed('Missing alu operation')
    comp = mnemonic(Comp, olist[-1], 'alu operation', line_number, text)

    # A computation that is neither stored nor tested does nothing.

    if dest is None and jump is None:
        raise malformed('Operation has no destination and no jump')

    return Instruction(Kind.COMPUTE, line_number, text, dest=dest, comp=comp, jump=jump)

# Parse every line of a source file. Blank and comment lines come back as
# INVALID instructions so that line numbers stay lined up with the source.
# Labels take no room in memory, so a label gets the address of whatever
# real instruction follows it.

def parse_lines(lines: Iterable[str]) -> List[Instruction]:

    ops: List[Instruction] = []
    pc = 0      # Program counter

    for line_number, line in enumerate(lines, 1):
        line = line.rstrip('\r\n')
        o = preprocess(line)
        if o is None:
            ops.append(Instruction(Kind.INVALID, line_number, line))
            continue
        op = parse(o, line_number, line)
        op.address_index = pc
        if op.occupies_memory:
            pc += 1
        logger.debug('%d: %s', line_number, op)
        ops.append(op)

    return ops
