# coding: utf-8

#---------------------------------------------------------------------------------------
# (C)2023 Robert Woodhead. Creative Commons Attribution License
#---------------------------------------------------------------------------------------

# Every failure during assembly is fatal. Each one is raised as an AssemblyError
# that remembers which line caused it, so the caller can report it and decide
# how to exit.

from typing import Optional


class AssemblyError(Exception):

    def __init__(self, reason: str, line_number: Optional[int] = None, text: str = ''):

        super().__init__(reason)
        self.reason = reason
        self.line_number = line_number
        self.text = text

    def __str__(self) -> str:

        if self.line_number is None:
            return f'Error: {self.reason}'
        return f'Error in line {self.line_number}: {self.reason}'


class MalformedInstructionError(AssemblyError):
    pass


class UnknownMnemonicError(MalformedInstructionError):
    pass


class UndefinedSymbolError(AssemblyError):
    pass


class ResolutionOrderError(AssemblyError):
    pass


class AddressOverflowError(AssemblyError):
    pass
