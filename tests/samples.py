"""Sample tile-init lines shared by the tests."""

from pathlib import Path

TILE_BIG_PIPE = (
    '[#nm:"Big Pipe", #sz:point(2,2), #specs:[1,1,1,1], #specs2:0, #tp:"voxelStruct", '
    '#repeatL:[1,9], #bfTiles:1, #rnd:1, #ptPos:60, #tags:["notTrashProp"]]'
)
TILE_SMALL_PIPE = (
    '[#nm:"Small Pipe", #sz:point(1,1), #specs:[1], #specs2:[0], #tp:"box", '
    '#bfTiles:0, #ptPos:20, #tags:[]]'
)
TILE_VALVE = (
    '[#nm:"Valve", #sz:point(1,2), #specs:[0,1], #specs2:0, #tp:"voxelStructRockType", '
    '#repeatL:[2,2,6], #bfTiles:0, #rnd:3, #ptPos:10, #tags:["nonSolid", "notProp"]]'
)
TILE_GRATE = (
    '[#nm:"Grate", #sz:point(3,1), #specs:[6,6,6], #specs2:0, #tp:"box", '
    '#bfTiles:1, #ptPos:5, #tags:[]]'
)
TILE_NO_NAME = '[#sz:point(1,1), #specs:[1], #tp:"box", #bfTiles:0, #ptPos:0]'


def write_tile_folder(root: Path) -> Path:
    """Build a small tile folder with a root init and four subfolders.

    Subfolders: ``pipes`` (matches the root "Pipes" header), ``extras``
    (no header, unmatched), ``broken`` (one bad line), ``empty`` (no init).
    """
    root.mkdir(parents=True, exist_ok=True)
    (root / "init.txt").write_text(
        "-- root tile init\n"
        '-["Pipes", color(10, 20, 30)]\n'
        f"{TILE_BIG_PIPE}\n"
        "\n"
        '-["Misc", color(1, 2, 3)]--CATEGORY_INDEX:7\n'
        f"{TILE_SMALL_PIPE}\n",
        encoding="utf-8",
    )

    pipes = root / "pipes"
    pipes.mkdir()
    (pipes / "init.txt").write_text(
        f'-["Pipes", color(10, 20, 30)]\n{TILE_VALVE}\n', encoding="utf-8"
    )
    (pipes / "color.txt").write_text("10,20,30", encoding="utf-8")

    extras = root / "extras"
    extras.mkdir()
    (extras / "init.txt").write_text(f"{TILE_GRATE}\n", encoding="utf-8")

    broken = root / "broken"
    broken.mkdir()
    (broken / "init.txt").write_text(f"{TILE_NO_NAME}\n", encoding="utf-8")
    (broken / "color.txt").write_text("0, 128", encoding="utf-8")

    (root / "empty").mkdir()
    (root / "notes.txt").write_text("not a folder", encoding="utf-8")
    return root
