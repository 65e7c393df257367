import inspect
import os


def find_stack_level() -> int:
    """
    Find the first frame outside of pyinfix.

    Used as ``stacklevel`` for warnings so that they point at the caller's
    code rather than at the module that emitted them.
    """
    import pyinfix as pi

    pkg_dir = os.path.dirname(pi.__file__)

    # https://stackoverflow.com/questions/17407119/python-inspect-stack-is-slow
    frame = inspect.currentframe()
    n = 0
    while frame and inspect.getfile(frame).startswith(pkg_dir):
        frame = frame.f_back
        n += 1
    return n
