"""
Industry tone presets, stored as custom tones with is_preset=True.
"""

INDUSTRY_PRESETS = [
    {
        "name": "Tech Thought Leader",
        "industry": "technology",
        "description_english": "insightful and forward-looking, explaining technical ideas in plain language",
        "description_kurdish": "تێڕوانینی قووڵ و داهاتوونەخش، بیرۆکە تەکنیکییەکان بە زمانێکی سادە ڕوون دەکاتەوە",
        "tone_mix": [
            {"tone": "informative", "percentage": 60},
            {"tone": "professional", "percentage": 40},
        ],
    },
    {
        "name": "Finance Advisor",
        "industry": "finance",
        "description_english": "precise, trustworthy and data-driven",
        "description_kurdish": "ورد، متمانەپێکراو و پشتبەستوو بە داتا",
        "tone_mix": [
            {"tone": "professional", "percentage": 70},
            {"tone": "informative", "percentage": 30},
        ],
    },
    {
        "name": "Healthcare Communicator",
        "industry": "healthcare",
        "description_english": "empathetic, clear and evidence-based",
        "description_kurdish": "بەسۆز، ڕوون و پشتبەستوو بە بەڵگە",
        "tone_mix": [
            {"tone": "friendly", "percentage": 50},
            {"tone": "informative", "percentage": 50},
        ],
    },
    {
        "name": "Marketing Storyteller",
        "industry": "marketing",
        "description_english": "energetic and persuasive, built around stories and outcomes",
        "description_kurdish": "پڕ وزە و قایلکەر، لەسەر چیرۆک و ئەنجامەکان بنیات نراوە",
        "tone_mix": [
            {"tone": "inspirational", "percentage": 50},
            {"tone": "casual", "percentage": 30},
            {"tone": "comedy", "percentage": 20},
        ],
    },
    {
        "name": "Educator",
        "industry": "education",
        "description_english": "patient, encouraging and structured",
        "description_kurdish": "بە ئارام، هاندەر و ڕێکخراو",
        "tone_mix": [
            {"tone": "informative", "percentage": 60},
            {"tone": "friendly", "percentage": 40},
        ],
    },
    {
        "name": "Startup Founder",
        "industry": "startup",
        "description_english": "candid, ambitious and personal, sharing lessons from building",
        "description_kurdish": "ڕاستگۆ، بەلەند و کەسی، وانەکانی دروستکردن هاوبەش دەکات",
        "tone_mix": [
            {"tone": "inspirational", "percentage": 50},
            {"tone": "casual", "percentage": 50},
        ],
    },
]
