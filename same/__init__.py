from same.cell import Cell
from same.hasher import Hasher, DefaultHasher, HashlibHasher
from same.traits import Same, RefHash, same
from same.handles import Ref, Box, Rc, Arc
from same.refcmp import RefCmp
