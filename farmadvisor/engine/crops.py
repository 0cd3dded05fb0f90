from typing import List
from farmadvisor.schema import CropRecord

_B, _R, _L, _C = "Black Cotton Soil", "Red Soil", "Loamy Soil", "Clay Soil"
_SL, _S, _WD = "Sandy Loam", "Sandy Soil", "Well-drained Soil"
_H, _A = "Hilly Soil", "Alluvial Soil"

_ROWS = [
    # name, season, soils, water, duration, yield, income, diseases, fertilizers
    ("Soybean",               "Kharif", [_B,_R,_L],    "Medium", 100, 15,  45000,  ["Rust","Blight","Mosaic Virus"],                 ["DAP","Urea","Potash"]),
    ("Cotton",                "Kharif", [_B,_R],       "High",   180, 8,   60000,  ["Bollworm","Whitefly","Leaf Curl"],              ["DAP","Urea","NPK"]),
    ("Maize",                 "Kharif", [_L,_SL,_R],   "Medium", 120, 25,  38000,  ["Stem Borer","Fall Army Worm","Leaf Blight"],     ["Urea","DAP","Potash"]),
    ("Wheat",                 "Rabi",   [_L,_C,_SL],   "Medium", 130, 20,  35000,  ["Rust","Smut","Aphids"],                          ["Urea","DAP","NPK"]),
    ("Sugarcane",             "Annual", [_L,_C],       "High",   365, 400, 80000,  ["Red Rot","Smut","Borer"],                        ["Urea","DAP","Potash"]),
    ("Rice",                  "Kharif", [_C,_L],       "High",   120, 22,  40000,  ["Blast","Blight","Brown Plant Hopper"],           ["Urea","DAP","Zinc Sulphate"]),

    ("Pearl Millet (Bajra)",  "Kharif", [_S,_SL,_R],   "Low",    75,  12,  18000,  ["Downy Mildew","Smut","Ergot"],                   ["Urea","DAP","Potash"]),
    ("Sorghum (Jowar)",       "Kharif", [_R,_SL,_B],   "Low",    110, 15,  22000,  ["Anthracnose","Grain Mold","Shoot Fly"],          ["Urea","DAP","NPK"]),
    ("Finger Millet (Ragi)",  "Kharif", [_R,_L,_H],    "Medium", 120, 10,  35000,  ["Blast","Brown Spot","Smut"],                     ["Urea","DAP","Potash"]),
    ("Groundnut",             "Kharif", [_SL,_R,_B],   "Medium", 120, 18,  55000,  ["Tikka Disease","Rust","Bud Necrosis"],           ["DAP","Potash","Gypsum"]),
    ("Sunflower",             "Kharif", [_R,_B,_L],    "Medium", 90,  12,  48000,  ["Downy Mildew","Rust","Head Rot"],                ["Urea","DAP","Potash"]),
    ("Sesame (Til)",          "Kharif", [_SL,_R,_WD],  "Low",    85,  8,   40000,  ["Phyllody","Bacterial Blight","Leaf Spot"],       ["Urea","DAP","Potash"]),
    ("Castor",                "Kharif", [_R,_SL,_B],   "Low",    150, 10,  45000,  ["Wilt","Gray Mold","Leaf Spot"],                  ["Urea","DAP","Potash"]),

    ("Barley",                "Rabi",   [_L,_SL,_C],   "Medium", 120, 18,  25000,  ["Stripe Rust","Loose Smut","Powdery Mildew"],     ["Urea","DAP","NPK"]),
    ("Chickpea (Gram)",       "Rabi",   [_C,_L,_B],    "Low",    120, 12,  42000,  ["Wilt","Blight","Pod Borer"],                     ["DAP","Potash","Rhizobium"]),
    ("Lentil (Masoor)",       "Rabi",   [_L,_C,_WD],   "Low",    110, 10,  50000,  ["Wilt","Rust","Blight"],                          ["DAP","Potash","Rhizobium"]),
    ("Mustard",               "Rabi",   [_L,_SL,_C],   "Low",    100, 12,  36000,  ["White Rust","Downy Mildew","Aphids"],            ["Urea","DAP","Potash"]),
    ("Safflower",             "Rabi",   [_B,_R,_SL],   "Low",    120, 8,   32000,  ["Wilt","Rust","Aphids"],                          ["Urea","DAP","Potash"]),
    ("Coriander",             "Rabi",   [_L,_WD,_SL],  "Medium", 90,  12,  60000,  ["Wilt","Stem Gall","Aphids"],                     ["Urea","DAP","Potash"]),

    ("Pigeon Pea (Arhar/Tur)","Kharif", [_R,_B,_SL],   "Medium", 180, 12,  65000,  ["Wilt","Sterility Mosaic","Pod Fly"],             ["DAP","Potash","Rhizobium"]),
    ("Green Gram (Moong)",    "Kharif", [_SL,_L,_WD],  "Low",    65,  8,   45000,  ["Yellow Mosaic","Powdery Mildew","Leaf Spot"],    ["DAP","Potash","Rhizobium"]),
    ("Black Gram (Urad)",     "Kharif", [_C,_L,_B],    "Medium", 70,  8,   55000,  ["Yellow Mosaic","Leaf Crinkle","Pod Borer"],      ["DAP","Potash","Rhizobium"]),

    ("Tomato",                "Rabi",   [_L,_SL,_WD],  "High",   120, 200, 150000, ["Blight","Wilt","Fruit Rot"],                     ["Urea","DAP","NPK"]),
    ("Onion",                 "Rabi",   [_L,_SL,_WD],  "Medium", 120, 150, 90000,  ["Purple Blotch","Downy Mildew","Thrips"],         ["Urea","DAP","Potash"]),
    ("Potato",                "Rabi",   [_L,_SL,_WD],  "Medium", 90,  180, 80000,  ["Late Blight","Early Blight","Black Scurf"],      ["Urea","DAP","Potash"]),
    ("Brinjal (Eggplant)",    "Kharif", [_L,_SL,_WD],  "Medium", 150, 120, 85000,  ["Bacterial Wilt","Little Leaf","Fruit Borer"],    ["Urea","DAP","NPK"]),
    ("Okra (Bhindi)",         "Kharif", [_L,_SL,_WD],  "Medium", 120, 80,  70000,  ["Yellow Mosaic","Powdery Mildew","Fruit Borer"],  ["Urea","DAP","Potash"]),
    ("Chilli",                "Kharif", [_L,_SL,_R],   "Medium", 180, 25,  125000, ["Anthracnose","Bacterial Wilt","Thrips"],         ["Urea","DAP","NPK"]),

    ("Turmeric",              "Kharif", [_L,_R,_WD],   "High",   300, 25,  200000, ["Rhizome Rot","Leaf Spot","Scale Insects"],       ["Organic Manure","NPK","Potash"]),
    ("Ginger",                "Kharif", [_L,_SL,_WD],  "High",   240, 100, 300000, ["Rhizome Rot","Bacterial Wilt","Leaf Spot"],      ["Organic Manure","NPK","Potash"]),
    ("Garlic",                "Rabi",   [_L,_SL,_WD],  "Medium", 150, 80,  160000, ["Purple Blotch","White Rot","Thrips"],            ["Urea","DAP","Potash"]),

    ("Jute",                  "Kharif", [_C,_L,_A],    "High",   120, 20,  35000,  ["Stem Rot","Root Rot","Anthracnose"],             ["Urea","DAP","Potash"]),

    ("Lucerne (Alfalfa)",     "Annual", [_L,_SL,_WD],  "High",   365, 60,  45000,  ["Root Rot","Leaf Spot","Aphids"],                 ["DAP","Potash","Organic Manure"]),
    ("Berseem",               "Rabi",   [_L,_C,_A],    "High",   120, 45,  25000,  ["Root Rot","Leaf Spot","Aphids"],                 ["DAP","Potash","Rhizobium"]),
]

CROPS: List[CropRecord] = [
    CropRecord(name=n, season=s, soil_types=soils, water_requirement=w, duration=d,
               expected_yield=y, estimated_income=inc, diseases=dis, fertilizers=fert)
    for n, s, soils, w, d, y, inc, dis, fert in _ROWS
]
