# Design code provisions
from .base_code import DesignCode
from .is456 import IS456, TAU_C_TABLE, interpolate_tau_c
