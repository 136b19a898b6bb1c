from skewgen.config.config import *
