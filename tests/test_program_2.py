from pathlib import Path

from plinth.interpreter import parse_program, Interpreter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_2_right_assoc_and_rebind(capsys):
    with open(EXAMPLES / 'program_2.plinth', 'r', encoding='utf-8') as f:
        source = f.read()
    ast = parse_program(source)
    interp = Interpreter()
    interp.run(ast)
    out = capsys.readouterr().out.strip()
    # 20 - (3 - 2), not (20 - 3) - 2
    assert out.split('\n') == ['19', '38']
    assert interp.global_env.get('x') == 38
