from braillator.base import *
from braillator.errors import *
from braillator.cells import *
from braillator.classify import *
from braillator.encoder import *
from braillator.decoder import *
from braillator.translator import *
from braillator.render import *
