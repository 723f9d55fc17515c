"""
Базовые геометрические классы (Geometric Base).

- Pose3 - поза (положение + ориентация) цели твина
- qmul, qrot, qinv - операции с кватернионами [x, y, z, w]
- look_rotation - ориентация по направлению движения
"""

from .pose3 import Pose3
from .quat import qmul, qinv, qrot, look_rotation

__all__ = [
    'Pose3',
    'qmul',
    'qinv',
    'qrot',
    'look_rotation',
]
