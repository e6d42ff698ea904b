from weightrank.core import *
from weightrank.measures import *
from weightrank.algorithms import *
