from namestamp.version import __version__
