import json

import pytest

from xlang.__main__ import main


@pytest.fixture
def program(tmp_path):
    path = tmp_path / 'math.x'
    path.write_text('var x = 1 + 2 * 3;\nprint("x is", x);\nx;\n', encoding='utf-8')
    return path


def test_runs_program_and_prints_result(program, capsys):
    main([str(program)])
    captured = capsys.readouterr()
    assert captured.out == 'x is 7\n7\n'
    assert 'Execution time:' in captured.err


def test_dumps_tokens(program, capsys):
    main(['--tokens', str(program)])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Token(VAR, 'var', 1:1)"
    assert lines[-1] == "Token(EOF, '', 4:1)"


def test_emit_ast_then_run_it(program, capsys):
    main(['--emit-ast', str(program)])
    out_path = capsys.readouterr().out.strip()
    assert out_path.endswith('math.x.ast.json')
    with open(out_path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    assert data['type'] == 'Program'
    assert len(data['body']) == 3

    main(['--ast', out_path])
    assert capsys.readouterr().out == 'x is 7\n7\n'


def test_reports_invalid_assignment_target(tmp_path, capsys):
    path = tmp_path / 'bad_target.x'
    path.write_text('1 = 2;\n', encoding='utf-8')
    main([str(path)])
    captured = capsys.readouterr()
    assert captured.err.count('Invalid assignment target.') == 1
    assert captured.out == '1\n'


@pytest.mark.parametrize('source, message', [
    ('var s = "open;\n', 'Unterminated string'),
    ('var x = ;\n', 'Expected expression.'),
    ('missing;\n', 'Variable not found: missing'),
])
def test_errors_exit_with_status_1(tmp_path, capsys, source, message):
    path = tmp_path / 'broken.x'
    path.write_text(source, encoding='utf-8')
    with pytest.raises(SystemExit) as excinfo:
        main([str(path)])
    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert err.startswith('Error: ')
    assert message in err


def test_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / 'nope.x')])
    assert excinfo.value.code == 1
    assert 'not found' in capsys.readouterr().err
