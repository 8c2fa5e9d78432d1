import pytest

from hackasm.codegen import codegen
from hackasm.errors import AddressOverflowError, AssemblyError, UndefinedSymbolError
from hackasm.parser import Instruction, Kind, parse
from hackasm.symbols import SymbolTable
from hackasm.tables import COMP_BITS, DEST_BITS, JUMP_BITS, Comp, Dest, Jump


def test_every_mnemonic_has_bits():
    assert set(COMP_BITS) == set(Comp)
    assert set(DEST_BITS) == set(Dest)
    assert set(JUMP_BITS) == set(Jump)
    assert len(Comp) == 28
    assert len(Dest) == 7
    assert len(Jump) == 7


def test_comp_bits_are_unique_per_a_bit():
    assert len(set(COMP_BITS.values())) == len(COMP_BITS)


@pytest.mark.parametrize('n', [0, 1, 2, 16, 255, 16384, 24576, 32767])
def test_address_constant(n):
    word = codegen(parse(f'@{n}'), SymbolTable())
    assert len(word) == 16
    assert word[0] == '0'
    assert int(word, 2) == n


def test_address_symbol():
    assert codegen(parse('@SCREEN'), SymbolTable()) == '0100000000000000'
    assert codegen(parse('@KBD'), SymbolTable()) == '0110000000000000'


@pytest.mark.parametrize('compact, word', [
    ('D=A', '1110110000010000'),
    ('D=D+A', '1110000010010000'),
    ('M=D', '1110001100001000'),
    ('M=M+1', '1111110111001000'),
    ('0;JMP', '1110101010000111'),
    ('D;JGT', '1110001100000001'),
    ('AMD=-1', '1110111010111000'),
    ('D=D-M', '1111010011010000'),
    ('A=!M', '1111110001100000'),
    ('MD=M-D;JNE', '1111000111011101'),
    ('AD=D|A;JLE', '1110010101110110'),
    ('M=D&M', '1111000000001000'),
])
def test_compute(compact, word):
    assert codegen(parse(compact), SymbolTable()) == word


def test_undefined_symbol():
    with pytest.raises(UndefinedSymbolError):
        codegen(parse('@stranger', 9), SymbolTable())


def test_address_overflow():
    table = SymbolTable()
    table.bind('huge', 40000)
    with pytest.raises(AddressOverflowError):
        codegen(parse('@huge'), table)


@pytest.mark.parametrize('kind', [Kind.LABEL, Kind.INVALID])
def test_no_code_for_labels_or_blank_lines(kind):
    with pytest.raises(AssemblyError):
        codegen(Instruction(kind, symbol='LOOP'), SymbolTable())
