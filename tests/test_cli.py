import io
import json

import pytest

from plinth.__main__ import main, run_repl
from plinth.interpreter import Interpreter


def write_program(tmp_path, text, name='prog.plinth'):
    path = tmp_path / name
    path.write_text(text, encoding='utf-8')
    return path


def test_run_file(tmp_path, capsys):
    path = write_program(tmp_path, 'const x = 20 - 3 - 2\nprint x, x > 10\n')
    main([str(path)])
    assert capsys.readouterr().out == '19\ntrue\n'


def test_legacy_operators_flag(tmp_path, capsys):
    path = write_program(tmp_path, 'print 2 <= 3\n')
    main(['--legacy-operators', str(path)])
    assert capsys.readouterr().out == 'false\n'


def test_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / 'absent.plinth')])
    assert excinfo.value.code == 1
    assert 'not found' in capsys.readouterr().err


def test_runtime_error_exit(tmp_path, capsys):
    path = write_program(tmp_path, 'print 1\nconst y = 1 / 0\n')
    with pytest.raises(SystemExit) as excinfo:
        main([str(path)])
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == '1\n'
    assert captured.err.strip() == 'Runtime error: DivisionByZero: integer division by zero'


def test_parse_error_exit(tmp_path, capsys):
    path = write_program(tmp_path, 'print 1\nconst x = (1 + 2\n')
    with pytest.raises(SystemExit) as excinfo:
        main([str(path)])
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    # nothing runs when the program does not parse
    assert captured.out == ''
    assert captured.err.startswith('Parse error: expected \')\' at 2:17')


def test_emit_and_run_ast(tmp_path, capsys):
    path = write_program(tmp_path, 'const a = 6\nprint a * 7\n')
    main(['--emit-ast', str(path)])
    out_path = tmp_path / 'prog.plinth.ast.json'
    assert capsys.readouterr().out.strip() == str(out_path)
    data = json.loads(out_path.read_text(encoding='utf-8'))
    assert [n['type'] for n in data['body']] == ['ConstBinding', 'BuiltinCall']

    main(['--ast', str(out_path)])
    assert capsys.readouterr().out == '42\n'


def test_verbose_writes_debug_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    path = write_program(tmp_path, 'const a = 1\n')
    main(['-vvv', str(path)])
    trace = (tmp_path / 'debug.txt').read_text(encoding='utf-8')
    assert 'advance: EOF' in trace
    assert 'bind a: Integer = 1' in trace


def test_repl_keeps_going_after_errors(capsys):
    session = io.StringIO(
        'const a = 2\n'
        'a = a * 5\n'
        '\n'
        'print a\n'
        'print 1 / 0\n'
        'const = 4\n'
        'print a\n'
        'exit\n'
        'print 999\n'
    )
    run_repl(Interpreter(), session)
    lines = capsys.readouterr().out.splitlines()
    assert lines[:4] == ['2', '10', '10', 'Runtime error: DivisionByZero: integer division by zero']
    assert lines[4].startswith('Parse error: expected identifier')
    assert lines[5:] == ['10']
