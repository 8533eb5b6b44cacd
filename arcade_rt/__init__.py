"""
Arcade runtime shared by the demos.

Provides:
- logging: per-module loggers configured from ARCADE_LOG_* env vars
- keyboard: Key enum and the per-frame KeyState capability set
- assets: ImageLoader and the fatal AssetLoadError
- host: HostLoop driving layout/update/draw once per frame
- games: BaseGame contract and the GameState enum
"""
