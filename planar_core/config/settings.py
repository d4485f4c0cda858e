# Precondition checks on Vector2D.arg_cmp (zero operands, unsupported element types).
# Disabled together with assert statements under `python -O`.
DEBUG_CHECKS = __debug__

# Element type of Vector2D.zero() when none is given
DEFAULT_DTYPE = float
