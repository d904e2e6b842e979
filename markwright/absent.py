# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from enum import Enum
from typing import final


@final
class Absent(Enum):
  '''
  Singleton class and value to indicate that an argument was not supplied at all,
  for cases where None is a meaningful user provided value.
  For example, `element('div')` renders as `<div>` while `element('div', children=None)` renders as `<div></div>`.

  see: https://www.python.org/dev/peps/pep-0484/#support-for-singleton-types-in-unions
  '''
  _ = 0
