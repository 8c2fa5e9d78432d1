# coding: utf-8

#---------------------------------------------------------------------------------------
# (C)2023 Robert Woodhead. Creative Commons Attribution License
#---------------------------------------------------------------------------------------

# Fixed tables for the HACK machine: the predefined symbols, the closed
# vocabularies of the three C-instruction fields, and the bit groups each
# mnemonic encodes to.

from enum import Enum
from typing import Dict

Values = Dict[str, int]     # Name:Values pairs, for example in symbol tables

MAXRAM = 16384              # Limit of ram space
MAXROM = 32768              # Limit of rom space
MAXCONSTANT = 32767         # Largest value an @-instruction can hold (15 bits)
FIRST_VARIABLE = 16         # Locations 0-15 are reserved, so 16 is the first available

# Various sets used in parsing.

SYMBOLCHARS = set('abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_.$:')
DECIMALCHARS = set('0123456789')

# The predefined symbols. Every symbol table starts out as a copy of this.

PREDEFINED: Values = {

    'R0': 0,
    'R1': 1,
    'R2': 2,
    'R3': 3,
    'R4': 4,
    'R5': 5,
    'R6': 6,
    'R7': 7,
    'R8': 8,
    'R9': 9,
    'R10': 10,
    'R11': 11,
    'R12': 12,
    'R13': 13,
    'R14': 14,
    'R15': 15,

    'SP': 0,
    'LCL': 1,
    'ARG': 2,
    'THIS': 3,
    'THAT': 4,

    'SCREEN': 16384,
    'KBD': 24576,

}

# C instruction template (the three leading 1 bits).

CINSTR = 0b1110000000000000

# Destinations. An absent destination means the result is discarded.

class Dest(Enum):

    M = 'M'
    D = 'D'
    MD = 'MD'
    A = 'A'
    AM = 'AM'
    AD = 'AD'
    AMD = 'AMD'

# Jumps. An absent jump means no jump.

class Jump(Enum):

    JGT = 'JGT'
    JEQ = 'JEQ'
    JGE = 'JGE'
    JLT = 'JLT'
    JNE = 'JNE'
    JLE = 'JLE'
    JMP = 'JMP'

# ALU computations. The first group works on A, the second on M.

class Comp(Enum):

    ZERO = '0'
    ONE = '1'
    MINUS_ONE = '-1'
    D = 'D'
    A = 'A'
    NOT_D = '!D'
    NOT_A = '!A'
    NEG_D = '-D'
    NEG_A = '-A'
    D_PLUS_1 = 'D+1'
    A_PLUS_1 = 'A+1'
    D_MINUS_1 = 'D-1'
    A_MINUS_1 = 'A-1'
    D_PLUS_A = 'D+A'
    D_MINUS_A = 'D-A'
    A_MINUS_D = 'A-D'
    D_AND_A = 'D&A'
    D_OR_A = 'D|A'

    M = 'M'
    NOT_M = '!M'
    NEG_M = '-M'
    M_PLUS_1 = 'M+1'
    M_MINUS_1 = 'M-1'
    D_PLUS_M = 'D+M'
    D_MINUS_M = 'D-M'
    M_MINUS_D = 'M-D'
    D_AND_M = 'D&M'
    D_OR_M = 'D|M'

# Opcodes for destinations (bits 5-3 of a C instruction).

DEST_BITS: Dict[Dest, int] = {

    Dest.M:     0b001,
    Dest.D:     0b010,
    Dest.MD:    0b011,
    Dest.A:     0b100,
    Dest.AM:    0b101,
    Dest.AD:    0b110,
    Dest.AMD:   0b111,

}

# Opcodes for jmps (bits 2-0).

JUMP_BITS: Dict[Jump, int] = {

    Jump.JGT:   0b001,
    Jump.JEQ:   0b010,
    Jump.JGE:   0b011,
    Jump.JLT:   0b100,
    Jump.JNE:   0b101,
    Jump.JLE:   0b110,
    Jump.JMP:   0b111,

}

# Opcodes for comps (bits 12-6). The leading bit is the a-bit, which selects
# M instead of A as the second ALU operand.

COMP_BITS: Dict[Comp, int] = {

    Comp.ZERO:      0b0101010,
    Comp.ONE:       0b0111111,
    Comp.MINUS_ONE: 0b0111010,
    Comp.D:         0b0001100,
    Comp.A:         0b0110000,
    Comp.NOT_D:     0b0001101,
    Comp.NOT_A:     0b0110001,
    Comp.NEG_D:     0b0001111,
    Comp.NEG_A:     0b0110011,
    Comp.D_PLUS_1:  0b0011111,
    Comp.A_PLUS_1:  0b0110111,
    Comp.D_MINUS_1: 0b0001110,
    Comp.A_MINUS_1: 0b0110010,
    Comp.D_PLUS_A:  0b0000010,
    Comp.D_MINUS_A: 0b0010011,
    Comp.A_MINUS_D: 0b0000111,
    Comp.D_AND_A:   0b0000000,
    Comp.D_OR_A:    0b0010101,

    Comp.M:         0b1110000,
    Comp.NOT_M:     0b1110001,
    Comp.NEG_M:     0b1110011,
    Comp.M_PLUS_1:  0b1110111,
    Comp.M_MINUS_1: 0b1110010,
    Comp.D_PLUS_M:  0b1000010,
    Comp.D_MINUS_M: 0b1010011,
    Comp.M_MINUS_D: 0b1000111,
    Comp.D_AND_M:   0b1000000,
    Comp.D_OR_M:    0b1010101,

}
