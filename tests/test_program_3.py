from pathlib import Path

from xlang.interpreter import parse_program, Interpreter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_3_while_sum(capsys):
    with open(EXAMPLES / 'program_3.x', 'r', encoding='utf-8') as f:
        source = f.read()
    ast = parse_program(source)
    interp = Interpreter(ast)
    result = interp.run()
    out = capsys.readouterr().out.strip()
    assert out == 'sum: 10'
    assert result == 10
