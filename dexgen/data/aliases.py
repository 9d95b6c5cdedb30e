"""Static alias dataset: shorthand, misspelled and foreign names -> display names.

Keys are already in identifier form (see ``dexgen.services.normalize.to_id``).
"""

from types import MappingProxyType

ALIASES = MappingProxyType({
    # mega evos
    "megaabomasnow": "Abomasnow-Mega",
    "megaabsol": "Absol-Mega",
    "megaaerodactyl": "Aerodactyl-Mega",
    "megaaggron": "Aggron-Mega",
    "megaalakazam": "Alakazam-Mega",
    "megaampharos": "Ampharos-Mega",
    "megabanette": "Banette-Mega",
    "megablastoise": "Blastoise-Mega",
    "megablaziken": "Blaziken-Mega",
    "megacharizard": "Charizard-Mega-Y",
    "megacharizardx": "Charizard-Mega-X",
    "megacharizardy": "Charizard-Mega-Y",
    "megagarchomp": "Garchomp-Mega",
    "megagardevoir": "Gardevoir-Mega",
    "megagengar": "Gengar-Mega",
    "megagyarados": "Gyarados-Mega",
    "megaheracross": "Heracross-Mega",
    "megahoundoom": "Houndoom-Mega",
    "megakangaskhan": "Kangaskhan-Mega",
    "megalatias": "Latias-Mega",
    "megalatios": "Latios-Mega",
    "megalucario": "Lucario-Mega",
    "megaluke": "Lucario-Mega",
    "megamanectric": "Manectric-Mega",
    "megamawile": "Mawile-Mega",
    "megamaw": "Mawile-Mega",
    "megamedicham": "Medicham-Mega",
    "megamedi": "Medicham-Mega",
    "megamewtwo": "Mewtwo-Mega-Y",
    "megamewtwox": "Mewtwo-Mega-X",
    "megamewtwoy": "Mewtwo-Mega-Y",
    "megapinsir": "Pinsir-Mega",
    "megascizor": "Scizor-Mega",
    "megatyranitar": "Tyranitar-Mega",
    "megattar": "Tyranitar-Mega",
    "megavenusaur": "Venusaur-Mega",
    "megavenu": "Venusaur-Mega",
    "mmx": "Mewtwo-Mega-X",
    "mmy": "Mewtwo-Mega-Y",

    # formes
    "bugceus": "Arceus-Bug",
    "darkceus": "Arceus-Dark",
    "dragonceus": "Arceus-Dragon",
    "eleceus": "Arceus-Electric",
    "fairyceus": "Arceus-Fairy",
    "fightceus": "Arceus-Fighting",
    "fireceus": "Arceus-Fire",
    "flyceus": "Arceus-Flying",
    "ghostceus": "Arceus-Ghost",
    "grassceus": "Arceus-Grass",
    "groundceus": "Arceus-Ground",
    "iceceus": "Arceus-Ice",
    "poisonceus": "Arceus-Poison",
    "psyceus": "Arceus-Psychic",
    "rockceus": "Arceus-Rock",
    "steelceus": "Arceus-Steel",
    "waterceus": "Arceus-Water",
    "basculinb": "Basculin-Blue-Striped",
    "basculinblue": "Basculin-Blue-Striped",
    "basculinbluestripe": "Basculin-Blue-Striped",
    "castformh": "Castform-Snowy",
    "castformice": "Castform-Snowy",
    "castformr": "Castform-Rainy",
    "castformwater": "Castform-Rainy",
    "castforms": "Castform-Sunny",
    "castformfire": "Castform-Sunny",
    "cherrims": "Cherrim-Sunshine",
    "cherrimsunny": "Cherrim-Sunshine",
    "cofag": "Cofagrigus",
    "darmanitanz": "Darmanitan-Zen",
    "darmanitanzenmode": "Darmanitan-Zen",
    "deoxysnormal": "Deoxys",
    "deon": "Deoxys",
    "deoxysa": "Deoxys-Attack",
    "deoa": "Deoxys-Attack",
    "deoxysd": "Deoxys-Defense",
    "deoxysdefence": "Deoxys-Defense",
    "deod": "Deoxys-Defense",
    "deoxyss": "Deoxys-Speed",
    "deos": "Deoxys-Speed",
    "ekiller": "Arceus",
    "esca": "Escavalier",
    "giratinao": "Giratina-Origin",
    "gourgeisthuge": "Gourgeist-Super",
    "keldeor": "Keldeo-Resolute",
    "keldeoresolution": "Keldeo-Resolute",
    "kyuremb": "Kyurem-Black",
    "kyuremw": "Kyurem-White",
    "landorust": "Landorus-Therian",
    "meloettap": "Meloetta-Pirouette",
    "meloettas": "Meloetta-Pirouette",
    "pumpkaboohuge": "Pumpkaboo-Super",
    "rotomc": "Rotom-Mow",
    "rotomf": "Rotom-Frost",
    "rotomh": "Rotom-Heat",
    "rotoms": "Rotom-Fan",
    "rotomw": "Rotom-Wash",
    "shaymins": "Shaymin-Sky",
    "skymin": "Shaymin-Sky",
    "thundurust": "Thundurus-Therian",
    "tornadust": "Tornadus-Therian",
    "wormadamg": "Wormadam-Sandy",
    "wormadamground": "Wormadam-Sandy",
    "wormadams": "Wormadam-Trash",
    "wormadamsteel": "Wormadam-Trash",
    "floettee": "Floette-Eternal-Flower",

    # base formes
    "nidoranfemale": "Nidoran-F",
    "nidoranmale": "Nidoran-M",
    "giratinaa": "Giratina",
    "giratinaaltered": "Giratina",
    "cherrimo": "Cherrim",
    "cherrimovercast": "Cherrim",
    "meloettaa": "Meloetta",
    "meloettaaria": "Meloetta",
    "basculinr": "Basculin",
    "basculinred": "Basculin",
    "basculinredstripe": "Basculin",
    "basculinredstriped": "Basculin",
    "tornadusi": "Tornadus",
    "tornadusincarnation": "Tornadus",
    "thundurusi": "Thundurus",
    "thundurusincarnation": "Thundurus",
    "landorusi": "Landorus",
    "landorusincarnation": "Landorus",
    "pumpkabooaverage": "Pumpkaboo",
    "gourgeistaverage": "Gourgeist",

    # cosmetic formes
    "gastrodone": "Gastrodon",
    "gastrodoneast": "Gastrodon",
    "gastrodonw": "Gastrodon",
    "gastrodonwest": "Gastrodon",

    # items
    "band": "Choice Band",
    "cb": "Choice Band",
    "chesto": "Chesto Berry",
    "chople": "Chople Berry",
    "custap": "Custap Berry",
    "fightgem": "Fighting Gem",
    "flightgem": "Flying Gem",
    "lefties": "Leftovers",
    "lo": "Life Orb",
    "lum": "Lum Berry",
    "occa": "Occa Berry",
    "salac": "Salac Berry",
    "scarf": "Choice Scarf",
    "specs": "Choice Specs",
    "yache": "Yache Berry",
    "av": "Assault Vest",
    "assvest": "Assault Vest",

    # gen 1-2 berries
    "berry": "Oran Berry",
    "bitterberry": "Persim Berry",
    "burntberry": "Rawst Berry",
    "goldberry": "Sitrus Berry",
    "iceberry": "Aspear Berry",
    "mintberry": "Chesto Berry",
    "miracleberry": "Lum Berry",
    "mysteryberry": "Leppa Berry",
    "przcureberry": "Cheri Berry",
    "psncureberry": "Pecha Berry",

    # pokemon
    "aboma": "Abomasnow",
    "chomp": "Garchomp",
    "dnite": "Dragonite",
    "don": "Groudon",
    "dogars": "Koffing",
    "ferro": "Ferrothorn",
    "forry": "Forretress",
    "gar": "Gengar",
    "garde": "Gardevoir",
    "hippo": "Hippowdon",
    "kyub": "Kyurem-Black",
    "kyuw": "Kyurem-White",
    "lando": "Landorus",
    "landoi": "Landorus",
    "landot": "Landorus-Therian",
    "luke": "Lucario",
    "mence": "Salamence",
    "ogre": "Kyogre",
    "p2": "Porygon2",
    "pory2": "Porygon2",
    "pz": "Porygon-Z",
    "poryz": "Porygon-Z",
    "rank": "Reuniclus",
    "smogon": "Koffing",
    "talon": "Talonflame",
    "terra": "Terrakion",
    "ttar": "Tyranitar",
    "zam": "Alakazam",

    # moves
    "bpass": "Baton Pass",
    "cc": "Close Combat",
    "cm": "Calm Mind",
    "dd": "Dragon Dance",
    "eq": "Earthquake",
    "espeed": "ExtremeSpeed",
    "faintattack": "Feint Attack",
    "hjk": "High Jump Kick",
    "hijumpkick": "High Jump Kick",
    "np": "Nasty Plot",
    "pup": "Power-up Punch",
    "qd": "Quiver Dance",
    "rocks": "Stealth Rock",
    "sd": "Swords Dance",
    "se": "Stone Edge",
    "spin": "Rapid Spin",
    "sr": "Stealth Rock",
    "sub": "Substitute",
    "tr": "Trick Room",
    "troom": "Trick Room",
    "tbolt": "Thunderbolt",
    "tspikes": "Toxic Spikes",
    "twave": "Thunder Wave",
    "web": "Sticky Web",
    "wow": "Will-O-Wisp",
    "playaround": "Play Rough",
    "glowpunch": "Power-up Punch",

    # Japanese names
    "birijion": "Virizion",
    "terakion": "Terrakion",
    "agirudaa": "Accelgor",
    "randorosu": "Landorus",
    "urugamosu": "Volcarona",
    "erufuun": "Whimsicott",
    "doryuuzu": "Excadrill",
    "burungeru": "Jellicent",
    "nattorei": "Ferrothorn",
    "shandera": "Chandelure",
    "roobushin": "Conkeldurr",
    "ononokusu": "Haxorus",
    "sazandora": "Hydreigon",
    "chirachiino": "Cinccino",
    "kyuremu": "Kyurem",
    "jarooda": "Serperior",
    "zoroaaku": "Zoroark",
    "shinboraa": "Sigilyph",
    "barujiina": "Mandibuzz",
    "rankurusu": "Reuniclus",
    "borutorosu": "Thundurus",
})
