"""Демонстрационное приложение переключения языка интерфейса на лету."""

__version__ = "1.0.0"
