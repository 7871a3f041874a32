from pywhitespace import Cmd, program
from pywhitespace.cli import main

HELLO = program((Cmd.PUSH, ord('h')), Cmd.WRITE_CHAR, (Cmd.PUSH, ord('i')), Cmd.WRITE_CHAR,
                (Cmd.PUSH, 5), (Cmd.PUSH, 3), Cmd.ADD, Cmd.WRITE_NUMBER, Cmd.EXIT)


def test_runs_program(tmp_path, capsys):
    path = tmp_path / 'hi.ws'
    path.write_bytes(b'comment ' + HELLO)
    assert main([str(path)]) == 0
    captured = capsys.readouterr()
    assert captured.out == 'hi8\n'
    assert captured.err == ''


def test_default_filename(tmp_path, monkeypatch, capsys):
    (tmp_path / 'hello-world.ws').write_bytes(HELLO)
    monkeypatch.chdir(tmp_path)
    assert main([]) == 0
    assert capsys.readouterr().out == 'hi8\n'


def test_runtime_failure(tmp_path, capsys):
    path = tmp_path / 'bad.ws'
    path.write_bytes(program((Cmd.PUSH, 10), Cmd.WRITE_NUMBER, Cmd.WRITE_NUMBER, Cmd.EXIT))
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == '10\n'
    assert captured.err == 'Error: stack underflow\n'


def test_translation_failure(tmp_path, capsys):
    path = tmp_path / 'bad.ws'
    path.write_bytes(program((Cmd.MARK, b' '), (Cmd.MARK, b' '), Cmd.EXIT))
    assert main([str(path)]) == 1
    assert 'duplicate label' in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / 'missing.ws')]) == 1
    assert capsys.readouterr().err.startswith('Error: ')


def test_step_limit(tmp_path, capsys):
    path = tmp_path / 'loop.ws'
    path.write_bytes(program((Cmd.MARK, b' '), (Cmd.JUMP, b' ')))
    assert main([str(path), '--max-steps', '10']) == 1
    assert 'did not halt within 10 steps' in capsys.readouterr().err


def test_list(tmp_path, capsys):
    path = tmp_path / 'hi.ws'
    path.write_bytes(program((Cmd.PUSH, 5), (Cmd.CALL, b' \t'), Cmd.EXIT))
    assert main([str(path), '--list']) == 0
    assert capsys.readouterr().out.splitlines() == [
        'Push(5)'.ljust(24) + 'IMP:Stack Manipulation',
        "Call('ST')".ljust(24) + 'IMP:Flow Control',
        'Exit'.ljust(24) + 'IMP:Flow Control',
    ]
