from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from mediaprobe.domain.scalars import FlexFloat


class SideData(BaseModel):
    # Display Matrix, Stereo 3D, Spherical Mapping, DOVI configuration record, ...
    model_config = ConfigDict(extra="allow", frozen=True)

    side_data_type: str
    displaymatrix: Optional[str] = None
    rotation: Optional[FlexFloat] = None
