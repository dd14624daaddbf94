import os

__version__ = "0.1.0"

# Get the base directory of the project (the directory containing this file)
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Path to the data directory (assumes 'data' is at the same level as 'romanize')
DATA_DIR = os.path.join(BASE_DIR, '..', 'data')

# User dictionaries (Janome / IPADIC CSV format)
DICTIONARIES_DIR = os.path.abspath(os.path.join(DATA_DIR, 'dictionaries'))
