from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Set

from .const import DEFAULT_INSPECTION_BUDGET, DEFAULT_OUTPUT_FOLDER_NAME


class Source(Enum):
    """候选程序的来源，数值越小优先级越高"""
    APP_PATHS = 'AppPaths'
    UNINSTALL = 'Uninstall'
    SCAN = 'Scan'

    @property
    def rank(self):
        return SOURCE_RANK[self]

    def __str__(self):
        return self.value


SOURCE_RANK = {Source.APP_PATHS: 0, Source.UNINSTALL: 1, Source.SCAN: 2}


class WriteFailure(Enum):
    TARGET_MISSING = 'TargetMissing'
    DESTINATION_UNAVAILABLE = 'DestinationUnavailable'
    ALREADY_EXISTS = 'AlreadyExists'
    WRITE_FAILED = 'WriteFailed'

    def __str__(self):
        return self.value


class RecoveryError(Exception):
    """调用方配置错误，整个流程无法继续"""


@dataclass
class CandidateApp:
    name: str
    target_path: str
    source: Source


@dataclass
class LauncherWriteResult:
    name: str
    target_path: str
    launcher_path: Optional[str] = None
    failure: Optional[WriteFailure] = None
    detail: str = ''

    @property
    def ok(self):
        return self.failure is None


@dataclass
class RecoveryOptions:
    all_users: bool = False
    inspection_budget: Optional[int] = DEFAULT_INSPECTION_BUDGET
    extra_scan_roots: List[str] = field(default_factory=list)
    destination_subfolder: str = DEFAULT_OUTPUT_FOLDER_NAME
    preview: bool = False
    auto: bool = False


@dataclass
class RecoveryReport:
    candidates: List[CandidateApp] = field(default_factory=list)
    existing_names: Set[str] = field(default_factory=set)
    selected: List[CandidateApp] = field(default_factory=list)
    results: List[LauncherWriteResult] = field(default_factory=list)
    destination: str = ''
    cancelled: bool = False
    preview: bool = False

    @property
    def succeeded(self):
        return [r for r in self.results if r.ok]

    @property
    def failed(self):
        return [r for r in self.results if not r.ok]
