import pytest

from formalkit.grammar import GrammarError, parse_grammar
from formalkit.grammar_commands import GrammarCommands
from formalkit.grammar_transforms import (
    eliminate_left_recursion,
    eliminate_useless_symbols,
    remove_cycles,
)

TEXT = "2\nE T\n2\n+ a\n3\nE -> E + T\nE -> T\nT -> a\nE"


@pytest.fixture
def grammar_file(tmp_path):
    path = tmp_path / "g.txt"
    path.write_text(TEXT, encoding="utf-8")
    return path


@pytest.fixture
def loaded(grammar_file):
    commands = GrammarCommands()
    commands.load_grammar(grammar_file)
    return commands


def test_load_reports_success(grammar_file):
    commands = GrammarCommands()
    assert commands.load_grammar(grammar_file) == f"Грамматика {grammar_file} прочитана успешно"
    assert commands.grammar == parse_grammar(TEXT)


def test_load_missing_file(tmp_path):
    commands = GrammarCommands()
    with pytest.raises(GrammarError, match="ошибка при чтении файла"):
        commands.load_grammar(tmp_path / "absent.txt")
    assert commands.grammar is None


def test_load_malformed_file(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("1\nE\n1\na\n1\nE = a\nE", encoding="utf-8")
    commands = GrammarCommands()
    with pytest.raises(GrammarError, match="некорректный формат правил"):
        commands.load_grammar(path)


def test_eliminate_left_recursion_writes_file(loaded, tmp_path):
    target = tmp_path / "g_lr.txt"
    message = loaded.eliminate_left_recursion()
    assert message == f"Вызов устранения левой рекурсии\nГрамматика записана в файл {target}\n"
    expected = str(eliminate_left_recursion(parse_grammar(TEXT)))
    assert target.read_text(encoding="utf-8") == expected


def test_eliminate_indirect_left_recursion_writes_file(loaded, tmp_path):
    target = tmp_path / "g_ilr.txt"
    message = loaded.eliminate_indirect_left_recursion()
    assert message.startswith("Вызов устранения косвенной левой рекурсии\n")
    assert message.endswith(f"Грамматика записана в файл {target}\n")
    expected = str(eliminate_left_recursion(remove_cycles(parse_grammar(TEXT))))
    assert target.read_text(encoding="utf-8") == expected


def test_eliminate_useless_symbols_writes_file(loaded, tmp_path):
    target = tmp_path / "g_us.txt"
    message = loaded.eliminate_useless_symbols()
    assert message.startswith("Вызов устранения бесполезных символов\n")
    expected = str(eliminate_useless_symbols(parse_grammar(TEXT)))
    assert target.read_text(encoding="utf-8") == expected


def test_written_grammar_reads_back(loaded, tmp_path):
    loaded.eliminate_left_recursion()
    written = parse_grammar((tmp_path / "g_lr.txt").read_text(encoding="utf-8"))
    assert written == eliminate_left_recursion(parse_grammar(TEXT))


def test_loaded_grammar_not_modified(loaded):
    loaded.eliminate_left_recursion()
    loaded.eliminate_indirect_left_recursion()
    loaded.eliminate_useless_symbols()
    assert loaded.grammar == parse_grammar(TEXT)


@pytest.mark.parametrize(
    "action",
    [
        GrammarCommands.eliminate_left_recursion,
        GrammarCommands.eliminate_indirect_left_recursion,
        GrammarCommands.eliminate_useless_symbols,
    ],
)
def test_commands_need_loaded_grammar(action):
    with pytest.raises(RuntimeError, match="Сначала введите грамматику!"):
        action(GrammarCommands())


def test_write_failure_is_reported(loaded, tmp_path):
    (tmp_path / "g_lr.txt").mkdir()
    with pytest.raises(OSError, match="Ошибка при записи файла"):
        loaded.eliminate_left_recursion()