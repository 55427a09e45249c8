from dingocli.core.component.binary_store.abc import BinaryStore
from dingocli.core.component.binary_store.fake import FakeBinaryStore
from dingocli.core.component.binary_store.real import RealBinaryStore

__all__ = ["BinaryStore", "FakeBinaryStore", "RealBinaryStore"]
