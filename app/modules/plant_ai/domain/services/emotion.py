# 📄 File: app/modules/plant_ai/domain/services/emotion.py
# 🧭 Purpose (Layman Explanation):
# Guesses how the plant "feels" in its reply by looking for happy, sad, excited or
# worried emojis and words, so the app can show a matching face.
# 🧪 Purpose (Technical Summary):
# Ordered substring heuristic mapping reply text to an Emotion; first matching rule wins.
# 🔗 Dependencies:
# models.chat.Emotion
# 🔄 Connected Modules / Calls From:
# chat_responder.py

from typing import Tuple

from ..models.chat import Emotion

# Checked in order; the first emotion with any marker present wins.
EMOTION_MARKERS: Tuple[Tuple[Emotion, Tuple[str, ...]], ...] = (
    (Emotion.ALEGRE, ("😊", "🌱", "feliz")),
    (Emotion.TRISTE, ("😔", "triste", "marchita")),
    (Emotion.EMOCIONADO, ("😄", "🎉", "genial")),
    (Emotion.PREOCUPADO, ("😟", "preocup", "ayuda")),
)


def detect_emotion(content: str) -> Emotion:
    text = (content or "").lower()
    for emotion, markers in EMOTION_MARKERS:
        if any(marker in text for marker in markers):
            return emotion
    return Emotion.NEUTRAL
