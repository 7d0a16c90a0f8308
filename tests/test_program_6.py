from pathlib import Path

from xlang.interpreter import parse_program, Interpreter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_6_if_inside_for_body(capsys):
    with open(EXAMPLES / 'program_6.x', 'r', encoding='utf-8') as f:
        source = f.read()
    ast = parse_program(source)
    interp = Interpreter(ast)
    interp.run()
    out = capsys.readouterr().out.strip()
    assert out.splitlines() == ['0 even', '1 odd', '2 even', '3 odd']
