from .main import main  # noqa
