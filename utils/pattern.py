import threading

class Singleton(type):
    """
    Metaclass for classes that must only be built once per process.
    Instruction:
        class Foo(metaclass=Singleton)
    Later calls return the first instance and ignore their arguments.
    """
    _instance = {}
    _lock = threading.Lock()

    def __call__(cls, *args, **kwds):
        if cls not in cls._instance:
            with cls._lock:
                if cls not in cls._instance:
                    cls._instance[cls] = super().__call__(*args, **kwds)
        return cls._instance[cls]

    def reset(cls) -> None:
        """Forget the instance so the next call builds a new one"""
        with cls._lock:
            cls._instance.pop(cls, None)
