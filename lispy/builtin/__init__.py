from lispy.builtin.base import Builtin
from lispy.builtin.env_builtin import BUILTINS, call_builtin, register

__all__ = ["Builtin", "BUILTINS", "call_builtin", "register"]
