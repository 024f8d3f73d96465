"""Download the KCL MultiLangDaemon jars and launch (or print) the daemon command."""

__version__ = "2.2.8"
