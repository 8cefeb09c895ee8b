import sys

from course_index import CourseIndex
from course_loader import LoadError, load_courses

DEFAULT_FILE = "CS 300 ABCU_Advising_Program_Input"

MENU = """Welcome to the course planner.
Menu:
  1. Load Data Structure.
  2. Print Course List.
  3. Print Course.
  9. Exit"""


class ShellState:
    def __init__(self, index, filename=DEFAULT_FILE):
        self.index = index
        self.filename = filename
        self.loaded = False
        self.running = True


def load(state):
    """ Loads the course file once. Asking again after a good load does nothing"""
    if state.loaded:
        return True
    try:
        load_courses(state.filename, state.index)
    except LoadError as e:
        print(e)
        return False
    state.loaded = True
    return True


def handle_choice(state, choice, read_input=input):
    choice = choice.strip()
    match choice:
        case "1":
            if load(state):
                print("Courses loaded successfully.")
        case "2":
            state.index.write_all(sys.stdout)
        case "3":
            course_id = read_input("What course do you want to know about? ").strip()
            course = state.index.search(course_id)
            if course is not None:
                print(course)
            else:
                print(f"Course ID {course_id} not found.")
        case "9":
            print("Thank you for using the course planner!")
            state.running = False
        case _:
            print(f"{choice} is not a valid option.")
    return state.running


def main(argv=None, read_input=input):
    argv = sys.argv if argv is None else argv
    filename = argv[1] if len(argv) > 1 else DEFAULT_FILE

    state = ShellState(CourseIndex(), filename)
    # A failed load is reported, the menu still comes up with an empty index
    load(state)

    while state.running:
        print(MENU)
        try:
            choice = read_input("What would you like to do? ")
            handle_choice(state, choice, read_input)
        except EOFError:
            break
    return 0


if __name__ == "__main__":
    sys.exit(main())
