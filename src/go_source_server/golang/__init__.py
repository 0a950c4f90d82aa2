from go_source_server.golang.goroot import GoRootProvider
from go_source_server.golang.modules import GoModuleInfo, GoModuleMaterializer, parse_module_info

__all__ = [
    "GoModuleInfo",
    "GoModuleMaterializer",
    "GoRootProvider",
    "parse_module_info",
]
