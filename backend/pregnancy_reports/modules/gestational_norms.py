"""
Clinical Norms Table: per-week reference values, gestational weeks 4-42.

Static data. A week with no entry resolves to the week 20 entry
(FALLBACK_WEEK); that substitution is the lookup policy, not an error.
"""

from typing import Dict

MIN_WEEK = 4
MAX_WEEK = 42
FALLBACK_WEEK = 20

GESTATIONAL_NORMS: Dict[int, dict] = {
    4: {
        'baby_size': 'poppy seed',
        'key_developments': ['Implantation occurring', 'Amniotic sac forming'],
        'typical_symptoms': ['Missed period', 'Mild cramping'],
        'normal_values': {
            'fetal_heart_rate': {'min': 80, 'max': 100},
            'expected_movements': 'Not detectable',
        },
    },
    5: {
        'baby_size': 'sesame seed',
        'key_developments': ['Heart begins to beat', 'Neural tube forming'],
        'typical_symptoms': ['Nausea', 'Breast tenderness'],
        'normal_values': {
            'fetal_heart_rate': {'min': 90, 'max': 110},
            'expected_movements': 'Not detectable',
        },
    },
    6: {
        'baby_size': 'lentil',
        'key_developments': ['Heart dividing into chambers', 'Facial features forming'],
        'typical_symptoms': ['Morning sickness', 'Fatigue'],
        'normal_values': {
            'fetal_heart_rate': {'min': 100, 'max': 120},
            'expected_movements': 'Not detectable',
        },
    },
    7: {
        'baby_size': 'blueberry',
        'key_developments': ['Brain developing rapidly', 'Limb buds forming'],
        'typical_symptoms': ['Frequent urination', 'Food aversions'],
        'normal_values': {
            'fetal_heart_rate': {'min': 120, 'max': 160},
            'expected_movements': 'Not detectable',
        },
    },
    8: {
        'baby_size': 'kidney bean',
        'key_developments': ['Fingers and toes forming', 'Eyelids developing'],
        'typical_symptoms': ['Bloating', 'Mood changes'],
        'normal_values': {
            'fetal_heart_rate': {'min': 140, 'max': 170},
            'expected_movements': 'Not detectable',
        },
    },
    9: {
        'baby_size': 'grape',
        'key_developments': ['All essential organs begun', 'Muscles developing'],
        'typical_symptoms': ['Heightened sense of smell', 'Mild cramping'],
        'normal_values': {
            'fetal_heart_rate': {'min': 140, 'max': 170},
            'expected_movements': 'Not detectable',
        },
    },
    10: {
        'baby_size': 'kumquat',
        'key_developments': ['Bones hardening', 'Vital organs functioning'],
        'typical_symptoms': ['Round ligament pain', 'Visible veins'],
        'normal_values': {
            'fetal_heart_rate': {'min': 120, 'max': 160},
            'expected_movements': 'Not detectable',
        },
    },
    11: {
        'baby_size': 'fig',
        'key_developments': ['Hair follicles forming', 'Genitals developing'],
        'typical_symptoms': ['Leg cramps', 'Growing appetite'],
        'normal_values': {
            'fetal_heart_rate': {'min': 120, 'max': 160},
            'expected_movements': 'Not detectable',
        },
    },
    12: {
        'baby_size': 'lime',
        'key_developments': ['Reflexes developing', 'Digestive system practicing'],
        'typical_symptoms': ['Nausea decreasing', 'Energy returning'],
        'normal_values': {
            'fetal_heart_rate': {'min': 120, 'max': 160},
            'expected_movements': 'Not detectable',
        },
    },
    13: {
        'baby_size': 'peach',
        'key_developments': ['Fingerprints forming', 'Vocal cords developing'],
        'typical_symptoms': ['Increased energy', 'Visible baby bump'],
        'normal_values': {
            'fetal_heart_rate': {'min': 120, 'max': 160},
            'expected_movements': 'Possible fluttering',
        },
    },
    14: {
        'baby_size': 'lemon',
        'key_developments': ['Facial muscles working', 'Kidneys producing urine'],
        'typical_symptoms': ['Reduced nausea', 'Nasal congestion'],
        'normal_values': {
            'fetal_heart_rate': {'min': 120, 'max': 160},
            'expected_movements': 'Possible fluttering',
        },
    },
    15: {
        'baby_size': 'apple',
        'key_developments': ['Bones becoming visible on ultrasound', 'Taste buds forming'],
        'typical_symptoms': ['Growing appetite', 'Skin changes'],
        'normal_values': {
            'fetal_heart_rate': {'min': 120, 'max': 160},
            'expected_movements': 'Possible fluttering',
        },
    },
    16: {
        'baby_size': 'avocado',
        'key_developments': ['Eyes moving', 'Limbs coordinating'],
        'typical_symptoms': ['Quickening (first movements)', 'Backaches'],
        'normal_values': {
            'fetal_heart_rate': {'min': 120, 'max': 160},
            'expected_movements': 'Flutters beginning',
        },
    },
    17: {
        'baby_size': 'turnip',
        'key_developments': ['Skeleton hardening', 'Sweat glands developing'],
        'typical_symptoms': ['Round ligament pain', 'Sciatic nerve pain'],
        'normal_values': {
            'fetal_heart_rate': {'min': 120, 'max': 160},
            'expected_movements': 'Flutters common',
        },
    },
    18: {
        'baby_size': 'bell pepper',
        'key_developments': ['Ears in final position', 'Myelin coating nerves'],
        'typical_symptoms': ['Increased appetite', 'Dizziness'],
        'normal_values': {
            'fetal_heart_rate': {'min': 120, 'max': 160},
            'expected_movements': 'Noticeable movements',
        },
    },
    19: {
        'baby_size': 'tomato',
        'key_developments': ['Vernix coating skin', 'Sensory development'],
        'typical_symptoms': ['Hip pain', 'Skin stretching'],
        'normal_values': {
            'fetal_heart_rate': {'min': 120, 'max': 160},
            'expected_movements': 'Regular movements',
        },
    },
    20: {
        'baby_size': 'banana',
        'key_developments': ['Halfway point', 'Swallowing amniotic fluid'],
        'typical_symptoms': ['Shortness of breath', 'Leg cramps'],
        'normal_values': {
            'fetal_heart_rate': {'min': 120, 'max': 160},
            'expected_movements': 'Regular movements',
        },
    },
    21: {
        'baby_size': 'carrot',
        'key_developments': ['Eyelids and eyebrows formed', 'Coordinated movements'],
        'typical_symptoms': ['Varicose veins', 'Stretch marks'],
        'normal_values': {
            'fetal_heart_rate': {'min': 120, 'max': 160},
            'expected_movements': 'Regular movements',
        },
    },
    22: {
        'baby_size': 'papaya',
        'key_developments': ['Eyes formed but iris lacks color', 'Lips more distinct'],
        'typical_symptoms': ['Swelling', 'Braxton Hicks beginning'],
        'normal_values': {
            'fetal_heart_rate': {'min': 120, 'max': 160},
            'expected_movements': '10+ movements/day',
        },
    },
    23: {
        'baby_size': 'mango',
        'key_developments': ['Hearing developed', 'Rapid weight gain'],
        'typical_symptoms': ['Swollen ankles', 'Gum sensitivity'],
        'normal_values': {
            'fetal_heart_rate': {'min': 120, 'max': 160},
            'expected_movements': '10+ movements/day',
        },
    },
    24: {
        'baby_size': 'ear of corn',
        'key_developments': ['Lungs developing surfactant', 'Viability milestone'],
        'typical_symptoms': ['Glucose screening time', 'Linea nigra'],
        'normal_values': {
            'fetal_heart_rate': {'min': 120, 'max': 160},
            'expected_movements': '10+ movements/day',
        },
    },
    25: {
        'baby_size': 'rutabaga',
        'key_developments': ['Fat deposits forming', 'Nostrils opening'],
        'typical_symptoms': ['Hemorrhoids', 'Heartburn'],
        'normal_values': {
            'fetal_heart_rate': {'min': 120, 'max': 160},
            'expected_movements': '10+ movements/day',
        },
    },
    26: {
        'baby_size': 'scallion',
        'key_developments': ['Eyes opening', 'Brain waves active'],
        'typical_symptoms': ['Trouble sleeping', 'Back pain'],
        'normal_values': {
            'fetal_heart_rate': {'min': 120, 'max': 160},
            'expected_movements': '10+ movements/day',
        },
    },
    27: {
        'baby_size': 'cauliflower',
        'key_developments': ['Regular sleep-wake cycles', 'Hiccups common'],
        'typical_symptoms': ['Restless legs', 'Pelvic pressure'],
        'normal_values': {
            'fetal_heart_rate': {'min': 120, 'max': 160},
            'expected_movements': '10+ movements/day',
        },
    },
    28: {
        'baby_size': 'eggplant',
        'key_developments': ['Third trimester begins', 'REM sleep occurring'],
        'typical_symptoms': ['Shortness of breath', 'Frequent urination'],
        'normal_values': {
            'fetal_heart_rate': {'min': 120, 'max': 160},
            'expected_movements': '10+ movements/2hr',
        },
    },
    29: {
        'baby_size': 'butternut squash',
        'key_developments': ['Bones fully developed', 'Storing calcium and iron'],
        'typical_symptoms': ['Constipation', 'Hemorrhoids'],
        'normal_values': {
            'fetal_heart_rate': {'min': 120, 'max': 160},
            'expected_movements': '10+ movements/2hr',
        },
    },
    30: {
        'baby_size': 'cabbage',
        'key_developments': ['Brain controlling body temperature', 'Gaining weight rapidly'],
        'typical_symptoms': ['Mood swings', 'Fatigue returning'],
        'normal_values': {
            'fetal_heart_rate': {'min': 120, 'max': 160},
            'expected_movements': '10+ movements/2hr',
        },
    },
    31: {
        'baby_size': 'coconut',
        'key_developments': ['Processing sensory information', 'Tracking light'],
        'typical_symptoms': ['Leaky breasts', 'Braxton Hicks'],
        'normal_values': {
            'fetal_heart_rate': {'min': 110, 'max': 160},
            'expected_movements': '10+ movements/2hr',
        },
    },
    32: {
        'baby_size': 'squash',
        'key_developments': ['Toenails grown', 'Practicing breathing'],
        'typical_symptoms': ['Heartburn', 'Shortness of breath'],
        'normal_values': {
            'fetal_heart_rate': {'min': 110, 'max': 160},
            'expected_movements': '10+ movements/2hr',
        },
    },
    33: {
        'baby_size': 'pineapple',
        'key_developments': ['Bones hardening', 'Skull remaining soft'],
        'typical_symptoms': ['Heat intolerance', 'Clumsiness'],
        'normal_values': {
            'fetal_heart_rate': {'min': 110, 'max': 160},
            'expected_movements': '10+ movements/2hr',
        },
    },
    34: {
        'baby_size': 'cantaloupe',
        'key_developments': ['Vernix thickening', 'Central nervous system maturing'],
        'typical_symptoms': ['Vision changes', 'Fatigue'],
        'normal_values': {
            'fetal_heart_rate': {'min': 110, 'max': 160},
            'expected_movements': '10+ movements/2hr',
        },
    },
    35: {
        'baby_size': 'honeydew melon',
        'key_developments': ['Kidneys fully developed', 'Liver processing waste'],
        'typical_symptoms': ['Frequent urination', 'Pelvic pressure'],
        'normal_values': {
            'fetal_heart_rate': {'min': 110, 'max': 160},
            'expected_movements': '10+ movements/2hr',
        },
    },
    36: {
        'baby_size': 'romaine lettuce',
        'key_developments': ['Shedding lanugo', 'Immune system ready'],
        'typical_symptoms': ['Lightning crotch', 'Nesting instinct'],
        'normal_values': {
            'fetal_heart_rate': {'min': 110, 'max': 160},
            'expected_movements': '10+ movements/2hr',
        },
    },
    37: {
        'baby_size': 'winter melon',
        'key_developments': ['Full term begins', 'Head engaging in pelvis'],
        'typical_symptoms': ['Easier breathing', 'Increased discharge'],
        'normal_values': {
            'fetal_heart_rate': {'min': 110, 'max': 160},
            'expected_movements': '10+ movements/2hr',
        },
    },
    38: {
        'baby_size': 'leek',
        'key_developments': ['Organ function mature', 'Meconium forming'],
        'typical_symptoms': ['Cervical changes', 'Bloody show possible'],
        'normal_values': {
            'fetal_heart_rate': {'min': 110, 'max': 160},
            'expected_movements': '10+ movements/2hr',
        },
    },
    39: {
        'baby_size': 'mini watermelon',
        'key_developments': ['Brain and lungs continue developing', 'Fat accumulating'],
        'typical_symptoms': ['Irregular contractions', 'Nesting'],
        'normal_values': {
            'fetal_heart_rate': {'min': 110, 'max': 160},
            'expected_movements': '10+ movements/2hr',
        },
    },
    40: {
        'baby_size': 'small pumpkin',
        'key_developments': ['Due date week', 'Ready for birth'],
        'typical_symptoms': ['Cervical dilation', 'Contractions'],
        'normal_values': {
            'fetal_heart_rate': {'min': 110, 'max': 160},
            'expected_movements': '10+ movements/2hr',
        },
    },
    41: {
        'baby_size': 'small pumpkin',
        'key_developments': ['Late term', 'Monitoring recommended'],
        'typical_symptoms': ['Labor signs', 'Increased monitoring'],
        'normal_values': {
            'fetal_heart_rate': {'min': 110, 'max': 160},
            'expected_movements': '10+ movements/2hr',
        },
    },
    42: {
        'baby_size': 'small pumpkin',
        'key_developments': ['Post-term', 'Induction likely discussed'],
        'typical_symptoms': ['Increased monitoring', 'Possible induction'],
        'normal_values': {
            'fetal_heart_rate': {'min': 110, 'max': 160},
            'expected_movements': '10+ movements/2hr',
        },
    },
}


def get_norms_for_week(week, norms: Dict[int, dict] = GESTATIONAL_NORMS) -> dict:
    """Return the norms entry for ``week``, or the FALLBACK_WEEK entry if absent."""
    entry = norms.get(week)
    if entry is None:
        return norms[FALLBACK_WEEK]
    return entry
