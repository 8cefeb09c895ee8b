import pytest

from course_index import CourseIndex, CourseRecord
from course_planner import ShellState, handle_choice, load, main


@pytest.fixture
def course_file(tmp_path):
    path = tmp_path / "courses.txt"
    path.write_text(
        "CSCI100,Introduction to Computer Science,\n"
        "CSCI200,Data Structures,CSCI101\n"
    )
    return path


@pytest.fixture
def state(course_file):
    return ShellState(CourseIndex(), str(course_file))


def feed(*answers):
    answers = iter(answers)

    def read_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError
    return read_input


def test_load_once(state, capsys):
    assert handle_choice(state, "1")
    assert handle_choice(state, "1")
    assert state.loaded
    assert state.index.count() == 2
    assert capsys.readouterr().out.count("Courses loaded successfully.") == 2


def test_load_failure(tmp_path, capsys):
    state = ShellState(CourseIndex(), str(tmp_path / "missing.txt"))
    assert not load(state)
    handle_choice(state, "1")
    out = capsys.readouterr().out
    assert "Error opening:" in out
    assert "Courses loaded successfully." not in out
    assert not state.loaded


def test_print_list(state, capsys):
    load(state)
    capsys.readouterr()
    handle_choice(state, "2")
    lines = capsys.readouterr().out.splitlines()
    assert sorted(lines) == [
        "Course ID: CSCI100, Course Name: Introduction to Computer Science, Prerequisite: ",
        "Course ID: CSCI200, Course Name: Data Structures, Prerequisite: CSCI101",
    ]


def test_print_course(state, capsys):
    load(state)
    capsys.readouterr()
    handle_choice(state, "3", feed(" CSCI200 "))
    assert capsys.readouterr().out == "Course ID: CSCI200, Course Name: Data Structures, Prerequisite: CSCI101\n"


def test_print_course_not_found(state, capsys):
    handle_choice(state, "3", feed("BIO101"))
    assert capsys.readouterr().out == "Course ID BIO101 not found.\n"


def test_duplicate_first_found():
    state = ShellState(CourseIndex())
    state.index.insert(CourseRecord("CS101", "Intro", ""))
    state.index.insert(CourseRecord("CS101", "IntroRetake", ""))
    assert state.index.search("CS101").name == "Intro"


def test_exit(state, capsys):
    assert not handle_choice(state, "9")
    assert not state.running
    assert "Thank you for using the course planner!" in capsys.readouterr().out


@pytest.mark.parametrize("choice", ["4", "abc", "", "12"])
def test_invalid_option(state, capsys, choice):
    assert handle_choice(state, choice)
    assert capsys.readouterr().out == f"{choice} is not a valid option.\n"


def test_main_loop(course_file, capsys):
    assert main(["course_planner.py", str(course_file)], feed("3", "CSCI100", "x", "9")) == 0
    out = capsys.readouterr().out
    assert "Loaded 2 courses" in out
    assert "Course ID: CSCI100, Course Name: Introduction to Computer Science" in out
    assert "x is not a valid option." in out
    assert out.count("Welcome to the course planner.") == 3
    assert out.rstrip().endswith("Thank you for using the course planner!")


def test_main_end_of_input(tmp_path, capsys):
    assert main(["course_planner.py", str(tmp_path / "missing.txt")], feed()) == 0
    out = capsys.readouterr().out
    assert "Error opening:" in out
    assert "Menu:" in out
