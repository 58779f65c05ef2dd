from abc import ABC, abstractmethod
from functools import wraps


def register(method_name: str = None):
    """wrap an agent method so callbacks see its start and end.

    callbacks receive the agent followed by the wrapped call's arguments;
    end hooks additionally get the result as ``result``.
    """
    def decorator(method):
        hook = method_name or method.__name__
        start_invoker = f"on_{hook}_start"
        end_invoker = f"on_{hook}_end"

        @wraps(method)
        def wrapper(self, *args, **kwargs):
            for clb in self.callbacks:
                getattr(clb, start_invoker)(self, *args, **kwargs)
            result = method(self, *args, **kwargs)
            for clb in self.callbacks:
                getattr(clb, end_invoker)(self, *args, result=result, **kwargs)
            return result

        return wrapper

    return decorator


class BaseCallback(ABC):

    @property
    @abstractmethod
    def scope(self) -> str:
        pass

    def on_select_start(self, *args, **kwargs):
        pass

    def on_select_end(self, *args, **kwargs):
        pass

    def on_train_start(self, *args, **kwargs):
        pass

    def on_train_end(self, *args, **kwargs):
        pass
