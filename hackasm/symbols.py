# coding: utf-8

#---------------------------------------------------------------------------------------
# (C)2023 Robert Woodhead. Creative Commons Attribution License
#---------------------------------------------------------------------------------------

# The symbol table, and the two passes that fill it in.
#
# The passes MUST run in order. Pass 1 binds every (LABEL) to the address of
# the instruction that follows it. Pass 2 then walks the @-instructions and
# gives every symbol it still doesn't know a fresh RAM slot. If pass 2 ran
# first, a forward reference to a label (@LOOP before (LOOP)) would be handed
# a RAM slot as though it were a variable.

import logging
import shutil
from typing import Iterable, List, Optional

from .errors import ResolutionOrderError, UndefinedSymbolError
from .parser import Instruction, Kind, is_constant
from .tables import FIRST_VARIABLE, PREDEFINED, Values

logger = logging.getLogger(__name__)


class SymbolTable:

    def __init__(self):

        self.symbols: Values = dict(PREDEFINED)
        self.ram = FIRST_VARIABLE       # Next free RAM slot for a variable
        self.labels_bound = False

        # Keep some lists of symbols of particular types. This lets us print
        # a nicely formatted symbol table at the end of assembly.

        self.predefined_symbols: List[str] = list(PREDEFINED)
        self.address_labels: List[str] = []
        self.variables: List[str] = []

    def __contains__(self, name: str) -> bool:

        return name in self.symbols

    def __getitem__(self, name: str) -> int:

        return self.symbols[name]

    def __len__(self) -> int:

        return len(self.symbols)

    # Bind a name unless it is already bound; the first binding always wins.
    # Returns True if the name was newly bound.

    def bind(self, name: str, value: int) -> bool:

        if name in self.symbols:
            return False
        self.symbols[name] = value
        return True

    # Pass 1, handle the () pseudo-instructions.

    def bind_labels(self, ops: Iterable[Instruction]) -> None:

        for o in ops:
            if o.kind == Kind.LABEL and self.bind(o.symbol, o.address_index):
                self.address_labels.append(o.symbol)
                logger.debug('Label %s = %d', o.symbol, o.address_index)

        self.labels_bound = True

    # Pass 2, handle the @-instructions. Anything not already known is a variable.

    def bind_variables(self, ops: Iterable[Instruction]) -> None:

        if not self.labels_bound:
            raise ResolutionOrderError('Variables cannot be allocated before labels are bound')

        for o in ops:
            if o.kind == Kind.ADDRESS and not is_constant(o.symbol) and self.bind(o.symbol, self.ram):
                self.variables.append(o.symbol)
                logger.debug('Variable %s = %d', o.symbol, self.ram)
                self.ram += 1

    # Run both passes, in the only order that works.

    def resolve(self, ops: List[Instruction]) -> 'SymbolTable':

        self.bind_labels(ops)
        self.bind_variables(ops)
        return self

    def lookup(self, name: str, op: Optional[Instruction] = None) -> int:

        if name not in self.symbols:
            raise UndefinedSymbolError(f'Undefined symbol [{name}]',
                                       op.line_number if op else None,
                                       op.text if op else '')
        return self.symbols[name]

# Print out a segment of the symbol table in a nicely formatted way.

def print_symbols(symbols: Values, valid: List[str], title: str, byname: bool, columns: Optional[int] = None):

    # .sort() helper functions, permits sorting by value or name (case-insensitive).

    def byValues(s: str):
        return symbols[s]

    def byNames(s: str):
        return s.upper()

    # Filter out the desired symbols.

    valid_symbols = [s for s in symbols.keys() if s in valid]

    if not valid_symbols:
        return

    if byname:
        valid_symbols.sort(key=byNames)
    else:
        valid_symbols.sort(key=byValues)

    # How wide is a column of symbols and values?

    num_symbols = len(valid_symbols)
    max_width = max([len(s) for s in valid_symbols])

    ruler = '-'*max_width + ' -----'
    separator = ' | '

    # How many columns can we fit in a line? If the screen isn't wide
    # enough, we do the best we can with one.

    if columns is None:
        columns = shutil.get_terminal_size().columns

    num_cols = max(1, min([(columns - len(separator)) // (len(ruler) + len(separator)), num_symbols]))
    num_rows = (num_symbols + num_cols - 1) // num_cols

    # Now that we know the number of rows, the number of columns needed may be less than the maximum we can fit.

    num_cols = (num_symbols + num_rows - 1) // num_rows

    formatted_symbols = [f'{s:{max_width}} {symbols[s]:5}' for s in valid_symbols]

    print(title + (' (by name)' if byname else ' (by value)'))
    print(separator.join([ruler for i in range(0, num_cols)]))

    # Symbols are laid out column-first, which is easier to read; the final
    # column may have some empty entries.

    for row in range(0, num_rows):
        print(separator.join([formatted_symbols[num_rows * col + row] if num_rows * col + row < num_symbols else '' for col in range(0, num_cols)]))

    print()

# Print all the groups of the symbol table.

def print_symbol_tables(table: SymbolTable, columns: Optional[int] = None):

    print()
    print_symbols(table.symbols, table.predefined_symbols, 'Predefined Symbols', byname=True, columns=columns)
    print_symbols(table.symbols, table.address_labels, 'Branch Addresses', byname=True, columns=columns)
    print_symbols(table.symbols, table.address_labels, 'Branch Addresses', byname=False, columns=columns)
    print_symbols(table.symbols, table.variables, 'Variables', byname=True, columns=columns)
    print_symbols(table.symbols, table.variables, 'Variables', byname=False, columns=columns)
