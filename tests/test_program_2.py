from pathlib import Path

from xlang.interpreter import parse_program, Interpreter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_2_precedence(capsys):
    with open(EXAMPLES / 'program_2.x', 'r', encoding='utf-8') as f:
        source = f.read()
    ast = parse_program(source)
    interp = Interpreter(ast)
    result = interp.run()
    out = capsys.readouterr().out.strip()
    assert out == '7\n9'
    # the last statement is `x;`
    assert result == 7
