from .setup import database
from .collections.token import Token
