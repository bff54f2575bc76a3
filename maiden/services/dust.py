from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..config import Settings
from ..schemas import Listing
from .device_path import DevicePath
from .listing import list_directory
from .mutator import ResourceMutator
from .resource_path import ResourcePath, split_name


@dataclass(frozen=True)
class Dust:
    devices: DevicePath
    resources: ResourcePath
    mutator: ResourceMutator

    @classmethod
    def from_settings(cls, config: Settings) -> Dust:
        devices = DevicePath.at(config.data_dir)
        resources = ResourcePath(config.api_prefix)
        return cls(devices, resources, ResourceMutator(devices, resources))

    def listing(self, path: Path) -> Listing:
        name = self.devices.name_of(path)
        return list_directory(path, self.resources.child(*split_name(name)), name)
