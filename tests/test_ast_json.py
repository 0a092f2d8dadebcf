import json

import pytest

from plinth.ast import Literal
from plinth.ast_json import ast_to_obj, ast_from_obj
from plinth.interpreter import parse_program, Interpreter


SOURCE = """\
# flags
const limit = -(3 + 4)
const over = not (limit > 0) xor false

print limit, over
"""


def test_json_round_trip_runs_the_same(capsys):
    program = parse_program(SOURCE)
    data = json.loads(json.dumps(ast_to_obj(program)))
    assert data['type'] == 'Program'
    assert data['body'][0] == {'type': 'EmptyStmt'}
    restored = ast_from_obj(data)
    assert restored == program

    Interpreter().run(restored)
    assert capsys.readouterr().out == '-7\ntrue\n'


def test_boolean_literal_keeps_its_type():
    restored = ast_from_obj({'type': 'Literal', 'value': 1, 'literal_type': 'Boolean'})
    assert restored == Literal(True, 'Boolean')
    assert restored.value is True


def test_unknown_node_type():
    with pytest.raises(ValueError):
        ast_from_obj({'type': 'WhileStmt'})
    with pytest.raises(ValueError):
        ast_from_obj({'type': 'Literal', 'value': 'x', 'literal_type': 'Str'})
