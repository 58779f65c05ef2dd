from typing import Annotated, Any
import numpy as np
from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema


class _VectorParamType:
    """one-dimensional numpy vector of a fixed dtype.

    values are never narrowed: a count vector only accepts integers, a reward
    vector accepts integers or floats. booleans are rejected for both.
    """

    def __init__(self, dtype: type[np.generic], kinds: str):
        self.dtype = dtype
        self.kinds = kinds

    def __get_pydantic_core_schema__(self, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            self._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda v: v.tolist(),
                info_arg=False,
            ),
        )

    def _validate(self, v: Any) -> np.ndarray:
        if not isinstance(v, (np.ndarray, list, tuple)):
            raise ValueError(f"Cannot convert {type(v)} to numpy array")
        raw = np.asarray(v)
        if raw.ndim != 1:
            raise ValueError(f"Expected a flat vector, got shape {raw.shape}")
        # an empty list carries no values, numpy just defaults it to float64
        if raw.size and raw.dtype.kind not in self.kinds:
            raise ValueError(f"Expected {np.dtype(self.dtype).name} values, got {raw.dtype}")
        return raw.astype(self.dtype, copy=False)


RewardVector = Annotated[np.ndarray, _VectorParamType(np.float64, kinds="iuf")]
CountVector = Annotated[np.ndarray, _VectorParamType(np.int64, kinds="iu")]
