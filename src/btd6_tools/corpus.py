"""Built-in alias corpus: towers, upgrades, heroes, maps and map difficulties.

Tower entries expand into one group per tower, per upgrade (15 named
upgrades plus the ``#222`` base line) and per path, all filed under
``("towers", <category>)``. Upgrade names are listed top path first, tier 1
first.
"""

import logging
import threading

from btd6_tools.aliases import AliasGroup, AliasRegistry, normalize_token
from btd6_tools.enums import (
    ALL_PATHS,
    BASE_UPGRADE_SET,
    HEROES_DIR,
    MAP_DIFFICULTIES,
    MAP_DIFFICULTIES_DIR,
    MAPS_DIR,
    PATH_NAMES,
    TOWERS_DIR,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Towers: canonical -> (category, display name, aliases, upgrade names by path)
# ---------------------------------------------------------------------------

TOWERS = {
    # Primary
    "dart_monkey": ("primary", "Dart Monkey", ["dart", "dm", "darts"], (
        ("Sharp Shots", "Razor Sharp Shots", "Spike-o-pult", "Juggernaut", "Ultra-Juggernaut"),
        ("Quick Shots", "Very Quick Shots", "Triple Shot", "Super Monkey Fan Club", "Plasma Monkey Fan Club"),
        ("Long Range Darts", "Enhanced Eyesight", "Crossbow", "Sharp Shooter", "Crossbow Master"),
    )),
    "boomerang_monkey": ("primary", "Boomerang Monkey", ["boomerang", "boomer", "rang"], (
        ("Improved Rangs", "Glaives", "Glaive Ricochet", "M.O.A.R. Glaives", "Glaive Lord"),
        ("Faster Throwing", "Faster Rangs", "Bionic Boomerang", "Turbo Charge", "Perma Charge"),
        ("Long Range Rangs", "Red Hot Rangs", "Kylie Boomerang", "MOAB Press", "MOAB Domination"),
    )),
    "bomb_shooter": ("primary", "Bomb Shooter", ["bomb", "cannon"], (
        ("Bigger Bombs", "Heavy Bombs", "Really Big Bombs", "Bloon Impact", "Bloon Crush"),
        ("Faster Reload", "Missile Launcher", "MOAB Mauler", "MOAB Assassin", "MOAB Eliminator"),
        ("Extra Range", "Frag Bombs", "Cluster Bombs", "Recursive Cluster", "Bomb Blitz"),
    )),
    "tack_shooter": ("primary", "Tack Shooter", ["tack", "tacks"], (
        ("Faster Shooting", "Even Faster Shooting", "Hot Shots", "Ring of Fire", "Inferno Ring"),
        ("Long Range Tacks", "Super Range Tacks", "Blade Shooter", "Blade Maelstrom", "Super Maelstrom"),
        ("More Tacks", "Even More Tacks", "Tack Sprayer", "Overdrive", "The Tack Zone"),
    )),
    "ice_monkey": ("primary", "Ice Monkey", ["ice"], (
        ("Permafrost", "Cold Snap", "Ice Shards", "Embrittlement", "Super Brittle"),
        ("Enhanced Freeze", "Deep Freeze", "Arctic Wind", "Snowstorm", "Absolute Zero"),
        ("Larger Radius", "Re-Freeze", "Cryo Cannon", "Icicles", "Icicle Impale"),
    )),
    "glue_gunner": ("primary", "Glue Gunner", ["glue", "gg"], (
        ("Glue Soak", "Corrosive Glue", "Bloon Dissolver", "Bloon Liquefier", "The Bloon Solver"),
        ("Bigger Globs", "Glue Splatter", "Glue Hose", "Glue Strike", "Glue Storm"),
        ("Stickier Glue", "Stronger Glue", "MOAB Glue", "Relentless Glue", "Super Glue"),
    )),
    # Military
    "sniper_monkey": ("military", "Sniper Monkey", ["sniper", "snipe"], (
        ("Full Metal Jacket", "Large Calibre", "Deadly Precision", "Maim MOAB", "Cripple MOAB"),
        ("Night Vision Goggles", "Shrapnel Shot", "Bouncing Bullet", "Supply Drop", "Elite Sniper"),
        ("Fast Firing", "Even Faster Firing", "Semi-Automatic", "Full Auto Rifle", "Elite Defender"),
    )),
    "monkey_sub": ("military", "Monkey Sub", ["sub", "submarine"], (
        ("Longer Range", "Advanced Intel", "Submerge and Support", "Bloontonium Reactor", "Energizer"),
        ("Barbed Darts", "Heat-tipped Darts", "Ballistic Missile", "First Strike Capability", "Pre-emptive Strike"),
        ("Twin Guns", "Airburst Darts", "Triple Guns", "Armor Piercing Darts", "Sub Commander"),
    )),
    "monkey_buccaneer": ("military", "Monkey Buccaneer", ["bucc", "buccaneer", "boat"], (
        ("Faster Shooting", "Double Shot", "Destroyer", "Aircraft Carrier", "Carrier Flagship"),
        ("Grape Shot", "Hot Shot", "Cannon Ship", "Monkey Pirates", "Pirate Lord"),
        ("Long Range", "Crow's Nest", "Merchantman", "Favored Trades", "Trade Empire"),
    )),
    "monkey_ace": ("military", "Monkey Ace", ["ace", "plane"], (
        ("Rapid Fire", "Lots More Darts", "Fighter Plane", "Operation: Dart Storm", "Sky Shredder"),
        ("Exploding Pineapple", "Spy Plane", "Bomber Ace", "Ground Zero", "Tsar Bomba"),
        ("Sharper Darts", "Centered Path", "Neva-Miss Targeting", "Spectre", "Flying Fortress"),
    )),
    "heli_pilot": ("military", "Heli Pilot", ["heli", "helicopter"], (
        ("Quad Darts", "Pursuit", "Razor Rotors", "Apache Dartship", "Apache Prime"),
        ("Bigger Jets", "IFR", "Downdraft", "Support Chinook", "Special Poperations"),
        ("Faster Darts", "Faster Firing", "MOAB Shove", "Comanche Defense", "Comanche Commander"),
    )),
    "mortar_monkey": ("military", "Mortar Monkey", ["mortar"], (
        ("Bigger Blast", "Bloon Buster", "Shell Shock", "The Big One", "The Biggest One"),
        ("Faster Reload", "Rapid Reload", "Heavy Shells", "Artillery Battery", "Pop and Awe"),
        ("Increased Accuracy", "Burny Stuff", "Signal Flare", "Shattering Shells", "Blooncineration"),
    )),
    "dartling_gunner": ("military", "Dartling Gunner", ["dartling", "gatling"], (
        ("Focused Firing", "Laser Shock", "Laser Cannon", "Plasma Accelerator", "Ray of Doom"),
        ("Advanced Targeting", "Faster Barrel Spin", "Hydra Rocket Pods", "Rocket Storm", "M.A.D"),
        ("Faster Swivel", "Powerful Darts", "Buckshot", "Bloon Area Denial System", "Bloon Exclusion Zone"),
    )),
    # Magic
    "wizard_monkey": ("magic", "Wizard Monkey", ["wizard", "wiz"], (
        ("Guided Magic", "Arcane Blast", "Arcane Mastery", "Arcane Spike", "Archmage"),
        ("Fireball", "Wall of Fire", "Dragon's Breath", "Summon Phoenix", "Wizard Lord Phoenix"),
        ("Intense Magic", "Monkey Sense", "Shimmer", "Necromancer: Unpopped Army", "Prince of Darkness"),
    )),
    "super_monkey": ("magic", "Super Monkey", ["super", "sm"], (
        ("Laser Blasts", "Plasma Blasts", "Sun Avatar", "Sun Temple", "True Sun God"),
        ("Super Range", "Epic Range", "Robo Monkey", "Tech Terror", "The Anti-Bloon"),
        ("Knockback", "Ultravision", "Dark Knight", "Dark Champion", "Legend of the Night"),
    )),
    "ninja_monkey": ("magic", "Ninja Monkey", ["ninja"], (
        ("Ninja Discipline", "Sharp Shurikens", "Double Shot", "Bloonjitsu", "Grandmaster Ninja"),
        ("Distraction", "Counter-Espionage", "Shinobi Tactics", "Bloon Sabotage", "Grand Saboteur"),
        ("Seeking Shuriken", "Caltrops", "Flash Bomb", "Sticky Bomb", "Master Bomber"),
    )),
    "alchemist": ("magic", "Alchemist", ["alch", "alchemist"], (
        ("Larger Potions", "Acidic Mixture Dip", "Berserker Brew", "Stronger Stimulant", "Permanent Brew"),
        ("Stronger Acid", "Perishing Potions", "Unstable Concoction", "Transforming Tonic", "Total Transformation"),
        ("Faster Throwing", "Acid Pool", "Lead to Gold", "Rubber to Gold", "Bloon Master Alchemist"),
    )),
    "druid": ("magic", "Druid", ["druid", "druid monkey"], (
        ("Hard Thorns", "Heart of Thunder", "Druid of the Storm", "Ball Lightning", "Superstorm"),
        ("Thorn Swarm", "Heart of Oak", "Druid of the Jungle", "Jungle's Bounty", "Spirit of the Forest"),
        ("Druidic Reach", "Heart of Vengeance", "Druid of Wrath", "Poplust", "Avatar of Wrath"),
    )),
    # Support
    "banana_farm": ("support", "Banana Farm", ["farm", "bfarm"], (
        ("Increased Production", "Greater Production", "Banana Plantation", "Banana Research Facility", "Banana Central"),
        ("Long Life Bananas", "Valuable Bananas", "Monkey Bank", "IMF Loan", "Monkey-Nomics"),
        ("EZ Collect", "Banana Salvage", "Marketplace", "Central Market", "Monkey Wall Street"),
    )),
    "spike_factory": ("support", "Spike Factory", ["spike", "spac", "spactory"], (
        ("Bigger Stacks", "White Hot Spikes", "Spiked Balls", "Spiked Mines", "Super Mines"),
        ("Faster Production", "Even Faster Production", "MOAB SHREDR", "Spike Storm", "Carpet of Spikes"),
        ("Long Reach", "Smart Spikes", "Long Life Spikes", "Deadly Spikes", "Perma-Spike"),
    )),
    "monkey_village": ("support", "Monkey Village", ["village", "vill"], (
        ("Bigger Radius", "Jungle Drums", "Primary Training", "Primary Mentoring", "Primary Expertise"),
        ("Grow Blocker", "Radar Scanner", "Monkey Intelligence Bureau", "Call to Arms", "Homeland Defense"),
        ("Monkey Business", "Monkey Commerce", "Monkey Town", "Monkey City", "Monkeyopolis"),
    )),
    "engineer_monkey": ("support", "Engineer Monkey", ["engineer", "engi"], (
        ("Sentry Gun", "Faster Engineering", "Sprockets", "Sentry Expert", "Sentry Champion"),
        ("Larger Service Area", "Deconstruction", "Cleansing Foam", "Overclock", "Ultraboost"),
        ("Oversize Nails", "Pin", "Double Gun", "Bloon Trap", "XXXL Trap"),
    )),
}

# Community nicknames for individual upgrades
UPGRADE_ALIASES = {
    "dart_monkey#400": ["jugg"],
    "dart_monkey#500": ["uj", "ultra jugg"],
    "dart_monkey#040": ["smfc"],
    "dart_monkey#050": ["pmfc"],
    "dart_monkey#005": ["cbm"],
    "boomerang_monkey#500": ["gl"],
    "bomb_shooter#050": ["moab elim"],
    "tack_shooter#500": ["inferno"],
    "tack_shooter#005": ["tack zone"],
    "ice_monkey#050": ["abs zero"],
    "glue_gunner#500": ["solver", "bloon solver"],
    "monkey_buccaneer#500": ["cfs", "flagship"],
    "monkey_ace#050": ["tsar"],
    "heli_pilot#050": ["spops", "special ops"],
    "mortar_monkey#500": ["biggest one"],
    "dartling_gunner#500": ["rod"],
    "wizard_monkey#050": ["wlp"],
    "wizard_monkey#005": ["pod", "prince"],
    "super_monkey#500": ["tsg"],
    "super_monkey#005": ["lotn"],
    "ninja_monkey#500": ["gmn"],
    "alchemist#005": ["bma"],
    "druid#050": ["sotf"],
    "druid#005": ["aow"],
    "banana_farm#050": ["monkeynomics"],
    "banana_farm#005": ["mws"],
    "monkey_village#050": ["hd"],
    "engineer_monkey#500": ["sentry champ"],
    "engineer_monkey#005": ["xxxl"],
}


# ---------------------------------------------------------------------------
# Heroes: canonical -> (display name, aliases)
# ---------------------------------------------------------------------------

HEROES = {
    "quincy": ("Quincy", ["quincy", "quincey"]),
    "gwendolin": ("Gwendolin", ["gwen", "gwendolyn"]),
    "striker_jones": ("Striker Jones", ["striker", "jones", "sj"]),
    "obyn_greenfoot": ("Obyn Greenfoot", ["obyn", "greenfoot"]),
    "captain_churchill": ("Captain Churchill", ["churchill", "church"]),
    "benjamin": ("Benjamin", ["ben", "benji"]),
    "ezili": ("Ezili", ["ezili", "ez"]),
    "pat_fusty": ("Pat Fusty", ["pat", "fusty"]),
    "adora": ("Adora", ["adora"]),
    "admiral_brickell": ("Admiral Brickell", ["brickell", "brick"]),
    "etienne": ("Etienne", ["etienne", "etn"]),
    "sauda": ("Sauda", ["sauda"]),
    "psi": ("Psi", ["psi"]),
    "geraldo": ("Geraldo", ["geraldo", "geri"]),
    "corvus": ("Corvus", ["corvus"]),
    "rosalia": ("Rosalia", ["rosalia", "rosa"]),
}


# ---------------------------------------------------------------------------
# Maps: difficulty -> [(canonical, display name, aliases)]
# ---------------------------------------------------------------------------

MAP_DIFFICULTY_ALIASES = {
    "beginner": ["beg"],
    "intermediate": ["int", "inter"],
    "advanced": ["adv"],
    "expert": ["exp"],
}

MAPS = {
    "beginner": [
        ("monkey_meadow", "Monkey Meadow", ["mm"]),
        ("tree_stump", "Tree Stump", ["ts"]),
        ("town_center", "Town Center", ["tc", "town centre"]),
        ("middle_of_the_road", "Middle of the Road", ["motr"]),
        ("one_two_tree", "One Two Tree", ["ott"]),
        ("scrapyard", "Scrapyard", ["sy"]),
        ("the_cabin", "The Cabin", ["cabin"]),
        ("resort", "Resort", ["rs"]),
        ("skates", "Skates", ["sk"]),
        ("lotus_island", "Lotus Island", ["li"]),
        ("candy_falls", "Candy Falls", ["cf"]),
        ("winter_park", "Winter Park", ["wp"]),
        ("carved", "Carved", ["crv"]),
        ("park_path", "Park Path", ["pp"]),
        ("alpine_run", "Alpine Run", ["ar"]),
        ("frozen_over", "Frozen Over", ["fo"]),
        ("in_the_loop", "In the Loop", ["itl"]),
        ("cubism", "Cubism", ["cub"]),
        ("four_circles", "Four Circles", ["4c"]),
        ("hedge", "Hedge", ["hdg"]),
        ("end_of_the_road", "End of the Road", ["eotr"]),
        ("logs", "Logs", ["log"]),
    ],
    "intermediate": [
        ("balance", "Balance", ["bal"]),
        ("encrypted", "Encrypted", ["enc"]),
        ("bazaar", "Bazaar", ["bzr"]),
        ("adoras_temple", "Adora's Temple", ["at"]),
        ("spring_spring", "Spring Spring", ["ss"]),
        ("kartsndarts", "KartsNDarts", ["knd", "karts n darts"]),
        ("moon_landing", "Moon Landing", ["ml"]),
        ("haunted", "Haunted", ["hau"]),
        ("downstream", "Downstream", ["ds"]),
        ("firing_range", "Firing Range", ["fr"]),
        ("cracked", "Cracked", ["crk"]),
        ("streambed", "Streambed", ["sb"]),
        ("chutes", "Chutes", ["cht"]),
        ("rake", "Rake", ["rk"]),
        ("spice_islands", "Spice Islands", ["si"]),
    ],
    "advanced": [
        ("cargo", "Cargo", ["cgo"]),
        ("pats_pond", "Pat's Pond", ["pat pond"]),
        ("peninsula", "Peninsula", ["pen"]),
        ("high_finance", "High Finance", ["hf"]),
        ("another_brick", "Another Brick", ["ab"]),
        ("off_the_coast", "Off the Coast", ["otc"]),
        ("cornfield", "Cornfield", ["crn"]),
        ("underground", "Underground", ["ug"]),
        ("sunken_columns", "Sunken Columns", ["sc"]),
        ("x_factor", "X Factor", ["xf"]),
        ("mesa", "Mesa", ["mes"]),
        ("geared", "Geared", ["grd"]),
        ("spillway", "Spillway", ["spw"]),
    ],
    "expert": [
        ("dark_castle", "Dark Castle", ["dc"]),
        ("muddy_puddles", "Muddy Puddles", ["mp"]),
        ("ouch", "#Ouch", ["hashtag ouch"]),
        ("flooded_valley", "Flooded Valley", ["fv"]),
        ("infernal", "Infernal", ["inf"]),
        ("bloody_puddles", "Bloody Puddles", ["bp"]),
        ("workshop", "Workshop", ["ws"]),
        ("quad", "Quad", ["qd"]),
        ("dark_dungeons", "Dark Dungeons", ["dd"]),
        ("sanctuary", "Sanctuary", ["san"]),
        ("ravine", "Ravine", ["rav"]),
    ],
}


# ---------------------------------------------------------------------------
# Corpus construction
# ---------------------------------------------------------------------------

def _tower_groups(
    canonical: str,
    category: str,
    name: str,
    aliases: list[str],
    upgrades,
    claimed: set[str],
) -> list[AliasGroup]:
    """Groups for one tower.

    Upgrade names already claimed by an earlier tower ("Double Shot",
    "Faster Reload"...) are prefixed with this tower's short alias instead
    ("ninja double shot"), so every name resolves to exactly one upgrade.
    """
    directory = (TOWERS_DIR, category)
    tower_aliases = [normalize_token(name), *(normalize_token(a) for a in aliases)]
    groups = [AliasGroup(canonical, tuple(tower_aliases), directory, display=name)]

    for path, names in zip(ALL_PATHS, upgrades):
        for tier, upgrade_name in enumerate(names, start=1):
            digits = ["0", "0", "0"]
            digits[path - 1] = str(tier)
            upgrade = f"{canonical}#{''.join(digits)}"
            extra = UPGRADE_ALIASES.get(upgrade, [])
            upgrade_alias = normalize_token(upgrade_name)
            if upgrade_alias in claimed:
                upgrade_alias = normalize_token(f"{aliases[0]} {upgrade_name}")
            claimed.add(upgrade_alias)
            groups.append(AliasGroup(
                upgrade,
                (upgrade_alias, *(normalize_token(a) for a in extra)),
                directory,
                display=upgrade_name,
            ))

    groups.append(AliasGroup(
        f"{canonical}#{BASE_UPGRADE_SET}",
        (normalize_token(f"base {name}"),),
        directory,
        display=name,
    ))

    for path in ALL_PATHS:
        path_name = PATH_NAMES[path]
        spoken = path_name.replace("-", " ")
        groups.append(AliasGroup(
            f"{canonical}#{path_name}",
            tuple(normalize_token(a) for a in [f"{spoken} {name}", f"{aliases[0]} {spoken}"]),
            directory,
            display=f"{spoken.title()} {name}",
        ))
    return groups


def build_alias_groups() -> list[AliasGroup]:
    """Expand the built-in tables into an ordered list of AliasGroups."""
    groups: list[AliasGroup] = []
    claimed: set[str] = set()
    for canonical, (category, name, aliases, upgrades) in TOWERS.items():
        groups.extend(_tower_groups(canonical, category, name, aliases, upgrades, claimed))

    for canonical, (name, aliases) in HEROES.items():
        groups.append(AliasGroup(canonical, tuple(normalize_token(a) for a in aliases), (HEROES_DIR,), display=name))

    for difficulty in MAP_DIFFICULTIES:
        groups.append(AliasGroup(
            difficulty,
            (difficulty, *MAP_DIFFICULTY_ALIASES[difficulty]),
            (MAP_DIFFICULTIES_DIR,),
        ))
        for canonical, name, aliases in MAPS[difficulty]:
            groups.append(AliasGroup(
                canonical,
                tuple(normalize_token(a) for a in [name, *aliases]),
                (MAPS_DIR, difficulty),
                display=name,
            ))

    return [
        AliasGroup(g.canonical, g.aliases, g.directory, position=i, display=g.display)
        for i, g in enumerate(groups)
    ]


_DEFAULT_REGISTRY: AliasRegistry | None = None
_DEFAULT_LOCK = threading.Lock()


def default_registry() -> AliasRegistry:
    """Return the process-wide registry over the built-in corpus, built once."""
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        with _DEFAULT_LOCK:
            if _DEFAULT_REGISTRY is None:
                _DEFAULT_REGISTRY = AliasRegistry(build_alias_groups())
                logger.info("Built default alias registry (%d towers)", len(TOWERS))
    return _DEFAULT_REGISTRY
