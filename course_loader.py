from time import perf_counter

from course_index import CourseRecord


class LoadError(ValueError):
    def __init__(self, message, path=None, line_number=None):
        super().__init__(message)
        self.path = path
        self.line_number = line_number


def parse_line(line, line_number=None):
    """ Splits "id,name,prerequisites" into a course.
    Only the first two commas count, the prerequisite text keeps any commas after that
    """
    line = line.rstrip("\r\n")
    parts = line.split(",", 2)
    if len(parts) != 3:
        raise LoadError(f"Line {line_number} is malformed: {line!r}", line_number=line_number)
    course_id, name, prerequisite = parts
    return CourseRecord(course_id, name, prerequisite)


def read_courses(path):
    courses = []
    try:
        with open(path, "r", encoding="utf-8-sig") as file:
            for line_number, line in enumerate(file, 1):
                if not line.strip():
                    continue
                try:
                    courses.append(parse_line(line, line_number))
                except LoadError as e:
                    e.path = path
                    raise
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"Error opening: {path}", path=path) from e
    return courses


def load_courses(path, index, quiet=False):
    """ Reads the whole file first, then inserts. If anything goes wrong the index is never touched"""
    start = perf_counter()
    courses = read_courses(path)
    for course in courses:
        index.insert(course)
    if not quiet:
        print(f"Loaded {len(courses)} courses in {perf_counter() - start:.4f} seconds")
    return len(courses)
