from pathlib import Path

from xlang.interpreter import parse_program, Interpreter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_8_number_semantics(capsys):
    with open(EXAMPLES / 'program_8.x', 'r', encoding='utf-8') as f:
        source = f.read()
    ast = parse_program(source)
    interp = Interpreter(ast)
    interp.run()
    out = capsys.readouterr().out.strip()
    assert out.splitlines() == [
        'Infinity -Infinity NaN',
        '1 -1 5',
        'false true true',
    ]
