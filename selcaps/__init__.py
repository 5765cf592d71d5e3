import selenium

# To re-export here.
from .errors import *
from .options import *
from .capabilities import *
from .config import *
from .resolver import *
from .driver import *
from .builder import *

sel_ver = tuple(int(part) for part in selenium.__version__.split(".")[:2])

if sel_ver < (4, 26):
    raise Exception("selcaps requires Selenium 4.26 or later, found: " +
                    selenium.__version__)
