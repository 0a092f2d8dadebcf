from pathlib import Path

from plinth.interpreter import parse_program, Interpreter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_1_print_order(capsys):
    with open(EXAMPLES / 'program_1.plinth', 'r', encoding='utf-8') as f:
        source = f.read()
    ast = parse_program(source)
    interp = Interpreter()
    interp.run(ast)
    out = capsys.readouterr().out
    assert out == '1\n2\n3\n'
