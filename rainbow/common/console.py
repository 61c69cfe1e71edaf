from threading import Lock

from imagination.decorator import service


@service.registered()
class Console:
    """
    Shared writer for the standard output

    Every demonstration prints through this service so that lines from concurrent demonstrations never interleave.
    """
    def __init__(self):
        self.__lock = Lock()

    def print(self, content):
        with self.__lock:
            print(content, flush=True)
