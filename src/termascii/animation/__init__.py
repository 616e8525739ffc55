from .animation import *
