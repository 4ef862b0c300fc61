import pytest

from tinytraits.examples import main, run_example


ALL_NAMES = [
    "as_ref",
    "debug",
    "eq",
    "hash",
    "into",
    "iter",
    "no_copy_move",
    "ord",
    "to_string",
]


def test_as_ref_prints_squared_norm():
    assert run_example("as_ref") == "25\n"


def test_debug_prints_point():
    assert run_example("debug") == "Point(1, 2)\n"


def test_eq_matches_commented_results():
    assert run_example("eq").splitlines() == ["false", "true", "true", "false"]


def test_hash_looks_up_both_keys():
    assert run_example("hash").splitlines() == ["p1", "p2"]


def test_into_converts_to_int_and_pair():
    lines = run_example("into").splitlines()
    assert lines[0] == "25"
    assert lines[1] == "3, 4"


def test_iter_lists_pushed_and_untouched_container():
    lines = run_example("iter").split("\n")
    assert lines[0].split() == ["10", "20", "30", "114514"]
    assert lines[1].split() == ["10", "20", "30"]
    assert lines[0].endswith(" ")


def test_no_copy_move_prints_nothing():
    assert run_example("no_copy_move") == ""


def test_ord_partial_then_total():
    lines = run_example("ord").split("\n")
    assert lines[:3] == ["true", "false", "false"]
    assert lines[3] == ""
    assert lines[4:7] == ["false", "true", "true"]


def test_to_string_prints_tuple_form():
    assert run_example("to_string") == "(1, 2)\n"


@pytest.mark.parametrize(
    "name, line_count",
    [
        ("as_ref", 1),
        ("debug", 1),
        ("eq", 4),
        ("hash", 2),
        ("into", 2),
        ("iter", 2),
        ("no_copy_move", 0),
        ("ord", 7),
        ("to_string", 1),
    ],
)
def test_examples_are_repeatable(name, line_count):
    first = run_example(name)
    second = run_example(name)
    assert len(first.splitlines()) == line_count
    assert second.splitlines() == first.splitlines()


def test_unknown_example_raises():
    with pytest.raises(ValueError, match="unknown example"):
        run_example("missing")


def test_main_runs_named_example(capsys):
    assert main(["eq"]) == 0
    assert capsys.readouterr().out == run_example("eq")


def test_main_runs_several_in_order(capsys):
    assert main(["debug", "to_string"]) == 0
    assert capsys.readouterr().out == run_example("debug") + run_example("to_string")


def test_main_without_names_runs_everything(capsys):
    assert main([]) == 0
    expected = "".join(run_example(name) for name in ALL_NAMES)
    assert capsys.readouterr().out == expected


def test_main_rejects_unknown_name(capsys):
    with pytest.raises(SystemExit) as info:
        main(["missing"])
    assert info.value.code == 2