"""初期表示用の動物データ（本来は外部データソースから供給される）"""

from typing import List

from .models import Animal


DEFAULT_ANIMALS: List[Animal] = [
    Animal(
        id=1,
        name="Maya",
        species="Dog",
        age=3,
        sex="Female",
        desc="Friendly, good with kids, vaccinated.",
        image="https://place-puppy.com/400x300",
    ),
    Animal(
        id=2,
        name="Chintu",
        species="Cat",
        age=2,
        sex="Male",
        desc="Indoor cat, loves naps and sunbeams.",
        image="https://placekitten.com/400/300",
    ),
    Animal(
        id=3,
        name="Kaju",
        species="Rabbit",
        age=1,
        sex="Female",
        desc="Gentle and playful — needs a calm home.",
        image="https://place-rabbit.com/400x300",
    ),
    Animal(
        id=4,
        name="Bruno",
        species="Dog",
        age=6,
        sex="Male",
        desc="Calm senior dog, house-trained.",
        image="https://place-puppy.com/401x301",
    ),
]
