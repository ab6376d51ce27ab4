import logging

NAME = 'namestamp'
ENCODING = 'UTF-8'
PATH = 'config.yml'
LOGGING = logging.INFO
