from statscollector.version import __version__  # noqa: F401
from statscollector.logger import initialize_logging


initialize_logging(__name__)
