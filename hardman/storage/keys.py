"""Persisted preference keys"""

PROFILE_KEYS = {
    "first_name": "profile.firstName",
    "last_name": "profile.lastName",
    "country": "profile.country",
    "birth_year": "profile.birthYear",
    "weight_kg": "profile.weightKg",
    "height_cm": "profile.heightCm",
    "goal": "profile.goal",
    "intensity": "profile.intensity",
    "voice_tone": "profile.voiceTone",
    "language_tag": "profile.languageTag",
}

EXPERIENCE_POINTS = "experiencePoints"
MISSIONS = "missions"
VOICE_VOLUME = "voiceVolume"
SFX_VOLUME = "sfxVolume"
