import pytest

from hackasm.errors import ResolutionOrderError, UndefinedSymbolError
from hackasm.parser import parse_lines
from hackasm.symbols import SymbolTable, print_symbol_tables, print_symbols
from hackasm.tables import PREDEFINED


def test_predefined_symbols():
    table = SymbolTable()
    assert len(table) == 23
    assert [table[f'R{i}'] for i in range(16)] == list(range(16))
    assert (table['SP'], table['LCL'], table['ARG'], table['THIS'], table['THAT']) == (0, 1, 2, 3, 4)
    assert table['SCREEN'] == 16384
    assert table['KBD'] == 24576
    assert table.ram == 16


def test_tables_are_not_shared():
    SymbolTable().bind('x', 99)
    assert 'x' not in SymbolTable()
    assert 'x' not in PREDEFINED


def test_label_and_variable():
    ops = parse_lines(['(LOOP)', '@i', 'M=M+1', '@LOOP', '0;JMP'])
    table = SymbolTable().resolve(ops)
    assert table['i'] == 16
    assert table['LOOP'] == 0
    assert table.address_labels == ['LOOP']
    assert table.variables == ['i']


def test_forward_reference_resolves_like_backward_reference():
    ops = parse_lines([
        '@END',         # 0
        '0;JMP',        # 1
        '(MID)',
        '@MID',         # 2
        '0;JMP',        # 3
        '(END)',
        '@END',         # 4
        '0;JMP',        # 5
    ])
    table = SymbolTable().resolve(ops)
    assert table['END'] == 4
    assert table['MID'] == 2
    assert table.variables == []
    assert table.ram == 16


def test_variables_allocated_in_first_seen_order():
    ops = parse_lines(['@a', 'D=M', '@b', 'D=M', '@a', 'D=M', '@R3', 'D=M', '@c', 'D=M', '@7', 'D=A'])
    table = SymbolTable().resolve(ops)
    assert (table['a'], table['b'], table['c']) == (16, 17, 18)
    assert table.variables == ['a', 'b', 'c']
    assert table.ram == 19


def test_first_binding_wins():
    ops = parse_lines(['(TWICE)', '@1', 'D=A', '(TWICE)', '(R0)', '@TWICE', '0;JMP'])
    table = SymbolTable().resolve(ops)
    assert table['TWICE'] == 0
    assert table['R0'] == 0
    assert table.address_labels == ['TWICE']


def test_variables_before_labels_is_refused():
    ops = parse_lines(['@LOOP', '0;JMP', '(LOOP)'])
    with pytest.raises(ResolutionOrderError):
        SymbolTable().bind_variables(ops)


def test_lookup_undefined():
    ops = parse_lines(['@nowhere', 'D=M'])
    with pytest.raises(UndefinedSymbolError) as info:
        SymbolTable().lookup('nowhere', ops[0])
    assert info.value.line_number == 1
    assert info.value.text == '@nowhere'


def test_print_symbols(capsys):
    symbols = {'b': 20, 'a': 30, 'c': 10}
    print_symbols(symbols, ['a', 'b', 'c'], 'Variables', byname=True, columns=10)
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == 'Variables (by name)'
    assert lines[1] == '- -----'
    assert lines[2:5] == ['a    30', 'b    20', 'c    10']


def test_print_symbols_by_value_in_columns(capsys):
    symbols = {'b': 20, 'a': 30, 'c': 10}
    print_symbols(symbols, ['a', 'b', 'c'], 'Variables', byname=False, columns=200)
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == 'Variables (by value)'
    assert lines[2] == 'c    10 | b    20 | a    30'


def test_print_symbols_skips_empty_groups(capsys):
    print_symbols({'a': 1}, [], 'Nothing', byname=True, columns=80)
    assert capsys.readouterr().out == ''


def test_print_symbol_tables(capsys):
    table = SymbolTable().resolve(parse_lines(['(LOOP)', '@i', 'M=M+1', '@LOOP', '0;JMP']))
    print_symbol_tables(table, columns=80)
    out = capsys.readouterr().out
    assert 'Predefined Symbols (by name)' in out
    assert 'Branch Addresses (by value)' in out
    assert 'Variables (by name)' in out
