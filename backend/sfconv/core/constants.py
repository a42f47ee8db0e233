DIMENSION_TAG = 'XY'
SFG_CLASS = 'sfg'
HANDLE_CLASS = 'Geom'

VECTOR_PREFIX = 'sfconv_'
VECTOR_CLASS = 'sfconv'
LIST_CLASS = 'list'

COORDINATE_COLUMNS = 2
