# coding: utf-8

#---------------------------------------------------------------------------------------
# (C)2023 Robert Woodhead. Creative Commons Attribution License
#---------------------------------------------------------------------------------------

# The actual assembler! It's a very linear process:
#
#   source lines -> parse_lines() -> SymbolTable.resolve() -> codegen() -> emit()
#
# Any error along the way is raised as an AssemblyError and nothing is produced.

import io
import logging
from dataclasses import dataclass, field
from typing import Iterable, List

from .codegen import codegen
from .errors import AssemblyError
from .parser import Instruction, parse_lines
from .symbols import SymbolTable
from .tables import MAXROM

logger = logging.getLogger(__name__)


@dataclass
class Assembly:

    ops: List[Instruction]
    symbols: SymbolTable
    words: List[str] = field(default_factory=list)

    @property
    def program_length(self) -> int:

        return len(self.words)

    @property
    def ram_usage(self) -> int:

        return self.symbols.ram

    def text(self) -> str:

        return emit(self.words)

# One word per line, each line newline-terminated.

def emit(words: Iterable[str]) -> str:

    return ''.join(word + '\n' for word in words)


def assemble_lines(lines: Iterable[str]) -> Assembly:

    ops = parse_lines(lines)

    program = [o for o in ops if o.occupies_memory]

    if len(program) > MAXROM:
        last = program[-1]
        raise AssemblyError('Program too large!', last.line_number, last.text)

    symbols = SymbolTable().resolve(ops)

    words = [codegen(o, symbols) for o in program]

    for o, word in zip(program, words):
        logger.debug('%5d %s\t%s', o.address_index, word, o.text.strip())

    return Assembly(ops, symbols, words)

# Assemble source text, returning the text of the .hack file. Lines are split
# the same way reading the .asm file splits them.

def assemble(source: str) -> str:

    return assemble_lines(io.StringIO(source, newline=None).readlines()).text()
