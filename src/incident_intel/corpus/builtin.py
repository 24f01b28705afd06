"""
Built-in corpora used when no external corpus source is configured.

The labeled samples cover every label the classifier is expected to emit;
the bootstrap descriptions reuse their text for fitting the featurizer.
"""

from typing import List, Tuple

from incident_intel.models import TrainingSample

WASTE_LABELS = (
    "recyclables",
    "hazardous",
    "organic",
    "e-waste",
    "bulk",
    "illegal_dumping",
)

# Used when a featurizer is fitted on an empty corpus
PLACEHOLDER_DOCUMENT = "incident report placeholder"

_LABELED_DESCRIPTIONS: List[Tuple[str, str]] = [
    ("Plastic bottles, cans overflowing recycling bin downtown", "recyclables"),
    ("Mixed recyclables piling up near transit station", "recyclables"),
    ("Cardboard and paper waste stacked beside warehouse", "recyclables"),
    ("Glass jars and aluminum piled beside neighborhood drop-off", "recyclables"),
    ("Bundle of newspapers left near library entrance", "recyclables"),
    ("Plastic packaging blowing across parking lot", "recyclables"),
    ("Recycling carts overflowing with cardboard boxes", "recyclables"),
    ("Blue bins full of cans and bottles behind school", "recyclables"),
    ("Chemical spill with strong odor near river", "hazardous"),
    ("Toxic paint buckets dumped illegally", "hazardous"),
    ("Oil drums leaking in industrial yard", "hazardous"),
    ("Pesticide containers found near community garden", "hazardous"),
    ("Laboratory solvents dumped behind clinic", "hazardous"),
    ("Mercury thermometer broken on sidewalk", "hazardous"),
    ("Acidic liquid seeping from warehouse loading dock", "hazardous"),
    ("Battery acid leaking beside electric substation", "hazardous"),
    ("Rotting food scraps attracting pests", "organic"),
    ("Yard waste and leaves blocking storm drain", "organic"),
    ("Compost bin overflow with organic matter", "organic"),
    ("Cafe tossing spoiled produce into alley", "organic"),
    ("Grocery store dumpster full of rotten fruit", "organic"),
    ("Restaurant grease traps spilling onto sidewalk", "organic"),
    ("Park littered with grass clippings and branches", "organic"),
    ("Farmers market bins full of unsold vegetables", "organic"),
    ("Abandoned computers and monitors near office park", "e-waste"),
    ("Pile of batteries and phones discarded", "e-waste"),
    ("CRT monitors dumped behind mall", "e-waste"),
    ("Laptop screens and cables strewn across loading dock", "e-waste"),
    ("Server racks abandoned near data center", "e-waste"),
    ("Printer cartridges tossed behind copy shop", "e-waste"),
    ("Smartphones and chargers mixed with regular trash", "e-waste"),
    ("Obsolete televisions stacked behind theater", "e-waste"),
    ("Construction rubble and concrete dumped roadside", "bulk"),
    ("Old furniture and mattresses left in alley", "bulk"),
    ("Demolition debris obstructing sidewalk", "bulk"),
    ("Broken pallets and drywall piled behind project site", "bulk"),
    ("Discarded carpet rolls blocking apartment driveway", "bulk"),
    ("Large tree limbs stacked beside bike path", "bulk"),
    ("Hot tub shell dumped next to playground", "bulk"),
    ("Metal beams and bricks abandoned beside parking lot", "bulk"),
    ("Illegal dumping of mixed trash in vacant lot", "illegal_dumping"),
    ("Garbage bags dumped at night behind store", "illegal_dumping"),
    ("Truck unloading waste outside permitted zone", "illegal_dumping"),
    ("Household trash thrown over park fence", "illegal_dumping"),
    ("Contractor dumping debris off the highway ramp", "illegal_dumping"),
    ("Dumpster contents spread across alley overnight", "illegal_dumping"),
    ("Mixed refuse left beside stormwater pond", "illegal_dumping"),
    ("Trash trailers emptying onto rural roadside", "illegal_dumping"),
    ("Overflowing recycling bins near metro station", "recyclables"),
    ("Broken glass bottles scattered near collection point", "recyclables"),
    ("Aluminum cans dumped near freight platform", "recyclables"),
    ("Plastic wrap and cardboard tossed outside warehouse", "recyclables"),
    ("Overloaded curbside bins with paper and cans", "recyclables"),
    ("Hazardous solvent drums rusting on pier", "hazardous"),
    ("Glow sticks and lab materials leaking in trash", "hazardous"),
    ("Used needles discovered near clinic dumpster", "hazardous"),
    ("Expired pharmaceuticals dumped behind pharmacy", "hazardous"),
    ("Spoiled meat leaking from grocery compactor", "organic"),
    ("Holiday tree piles blocking community garden gate", "organic"),
    ("Electronics kiosk overflowing with phones", "e-waste"),
    ("Abandoned copier and fax machines near lobby", "e-waste"),
    ("Couch and dresser dumped beside river trail", "bulk"),
    ("Construction site leaving drywall scraps on curb", "bulk"),
    ("Pickup truck dumping trash bags in field", "illegal_dumping"),
    ("Contractor disposing rubble in public park", "illegal_dumping"),
]


def builtin_training_samples() -> List[TrainingSample]:
    """Return a fresh list of the built-in labeled samples."""
    return [TrainingSample(text=text, label=label) for text, label in _LABELED_DESCRIPTIONS]


def builtin_descriptions() -> List[str]:
    """Return the built-in example incident descriptions."""
    return [text for text, _ in _LABELED_DESCRIPTIONS]
