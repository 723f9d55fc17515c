"""
Waypath - движение объектов по путевым точкам (path tweening).

Основные модули:
- path - интерполяция по длине дуги (отрезки и сплайн Catmull-Rom)
- tween - экземпляры твинов, пул и менеджер
- geombase - поза и кватернионы
- kinematic - цели твинов
"""

from .errors import (
    InvalidParametersError,
    InvalidTargetError,
    PathTweenError,
    TweenNotFoundError,
)
from .config import TweenSettings
from .geombase import Pose3
from .kinematic import Transform3, TweenTarget
from .path import PathType, PathwayType
from .tween import PathTween, PathTweenManager, TweenPool, TweenState

__version__ = '0.1.0'

__all__ = [
    # Errors
    'PathTweenError',
    'InvalidTargetError',
    'InvalidParametersError',
    'TweenNotFoundError',
    # Settings
    'TweenSettings',
    # Geometry
    'Pose3',
    'Transform3',
    'TweenTarget',
    # Path
    'PathwayType',
    'PathType',
    # Tween
    'PathTween',
    'PathTweenManager',
    'TweenPool',
    'TweenState',
]
