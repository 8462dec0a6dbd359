from .Delta import Delta
