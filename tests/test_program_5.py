from pathlib import Path

from plinth.interpreter import parse_program, Interpreter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_5_booleans(capsys):
    with open(EXAMPLES / 'program_5.plinth', 'r', encoding='utf-8') as f:
        source = f.read()
    ast = parse_program(source)
    interp = Interpreter()
    interp.run(ast)
    out = capsys.readouterr().out.strip()
    assert out.split('\n') == ['true', 'false', 'false', 'true', 'false']


def test_program_5_booleans_legacy_xor(capsys):
    with open(EXAMPLES / 'program_5.plinth', 'r', encoding='utf-8') as f:
        source = f.read()
    ast = parse_program(source)
    interp = Interpreter(legacy_operators=True)
    interp.run(ast)
    out = capsys.readouterr().out.strip()
    # legacy mode computes `or` for `xor`
    assert out.split('\n') == ['true', 'false', 'false', 'true', 'true']
