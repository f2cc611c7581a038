from __future__ import annotations

DEMO_LESSONS = [
    {
        "id": "demo-1",
        "topic": "Newton's Third Law",
        "raw_transcript": (
            "So, um, good morning everyone. Settle down please. Today, uh, we're gonna talk about, "
            "you know, Newton's Third Law..."
        ),
        "cleaned_transcript": (
            "Newton's Third Law states that for every action, there is an equal and opposite reaction. "
            "This means that in every interaction, there is a pair of forces acting on the two interacting objects. "
            "The size of the forces on the first object equals the size of the force on the second object. "
            "The direction of the force on the first object is opposite to the direction of the force on the "
            "second object. Forces always come in pairs - equal and opposite action-reaction force pairs."
        ),
        "summary": (
            "Newton's Third Law explains that forces always occur in pairs. If object A exerts a force on object B, "
            "object B exerts an equal and opposite force on object A. This interaction is simultaneous."
        ),
        "real_life_examples": [
            "Walking: You push the ground backward, and the ground pushes you forward with equal force.",
            "Rocket Launch: The rocket engines push gas downward, and the gas pushes the rocket upward.",
            "Rowing a boat: You push the water back with the paddle, and the water pushes the boat forward.",
        ],
        "exam_questions": [
            {
                "question": "State Newton's Third Law and provide one example.",
                "marks": 3,
                "type": "Short",
                "answer_key": (
                    "Definition: Every action has an equal and opposite reaction. "
                    "Example: Recoil of a gun or swimming."
                ),
            },
            {
                "question": "Explain why a rocket can accelerate in space where there is no air to push against.",
                "marks": 4,
                "type": "Medium",
                "answer_key": (
                    "Rockets work by expelling gas backward at high speed. By Newton's 3rd Law, the gas exerts an "
                    "equal and opposite force forward on the rocket. It does not need air to push against."
                ),
            },
            {
                "question": "Discuss the forces involved when a person jumps off a small boat versus a concrete dock.",
                "marks": 5,
                "type": "Long",
                "answer_key": (
                    "When jumping, you push back on the surface. A concrete dock has large mass/friction and doesn't "
                    "move, so you accelerate forward. A small boat moves backward (recoils) as you push, absorbing "
                    "some energy, making the jump less effective."
                ),
            },
        ],
        "quiz": [
            {
                "id": 1,
                "question": "Action and reaction forces act on:",
                "options": ["The same object", "Different objects", "No objects", "Gravity only"],
                "correct_answer": 1,
                "explanation": "Action and reaction forces always act on two different interacting objects.",
            },
            {
                "id": 2,
                "question": "If you punch a wall with 50N of force, the wall hits you back with:",
                "options": ["0N", "25N", "50N", "100N"],
                "correct_answer": 2,
                "explanation": "Forces are always equal in magnitude. If you exert 50N, the wall exerts 50N back.",
            },
            {
                "id": 3,
                "question": "Forces always occur in:",
                "options": ["Triplets", "Pairs", "Isolation", "Sequence"],
                "correct_answer": 1,
                "explanation": "Forces never exist in isolation; they always exist as an action-reaction pair.",
            },
            {
                "id": 4,
                "question": "The direction of the reaction force is:",
                "options": ["Same as action", "Perpendicular to action", "Opposite to action", "Random"],
                "correct_answer": 2,
                "explanation": "The reaction force is always opposite to the direction of the action force.",
            },
            {
                "id": 5,
                "question": "Which example best demonstrates the law?",
                "options": [
                    "A book resting on a table",
                    "A car braking",
                    "A swimmer pushing off a pool wall",
                    "A falling apple",
                ],
                "correct_answer": 2,
                "explanation": "A swimmer pushing the wall backward to move forward is a direct application of action-reaction.",
            },
        ],
    },
    {
        "id": "demo-2",
        "topic": "Photosynthesis Basics",
        "raw_transcript": "Okay class, let's look at how plants eat. It's called photosynthesis...",
        "cleaned_transcript": (
            "Photosynthesis is the process used by plants, algae, and certain bacteria to harness energy from "
            "sunlight and turn it into chemical energy. Plants take in carbon dioxide (CO2) from the air and water "
            "(H2O) from the soil. Inside the plant cells, specifically in the chloroplasts, chlorophyll traps light "
            "energy. The plant converts this light energy, CO2, and water into glucose (sugar) and oxygen. The "
            "glucose is used by the plant for energy and growth, while oxygen is released as a byproduct."
        ),
        "summary": (
            "Photosynthesis is the biological process where plants use sunlight to convert water and carbon dioxide "
            "into glucose and oxygen, providing food for the plant and oxygen for the atmosphere."
        ),
        "real_life_examples": [
            "Solar Panels: Similar to leaves, solar panels capture sunlight to generate usable energy (electricity).",
            "Baking a Cake: You take ingredients (CO2 + Water) and apply heat (Sunlight) to create a finished product.",
            "Recharging a Battery: Photosynthesis stores energy in chemical bonds (glucose) like charging a battery.",
        ],
        "exam_questions": [
            {
                "question": "What is the primary purpose of photosynthesis?",
                "marks": 3,
                "type": "Short",
                "answer_key": "To convert light energy into chemical energy (glucose) for the plant's growth.",
            },
            {
                "question": "Write the word equation for photosynthesis.",
                "marks": 4,
                "type": "Medium",
                "answer_key": "Carbon Dioxide + Water --(Light/Chlorophyll)--> Glucose + Oxygen.",
            },
            {
                "question": "Explain the role of chlorophyll and chloroplasts in the process.",
                "marks": 5,
                "type": "Long",
                "answer_key": (
                    "Chloroplasts are the organelles where photosynthesis happens. Chlorophyll is the pigment inside "
                    "them that absorbs light energy required to drive the chemical reaction."
                ),
            },
        ],
        "quiz": [
            {
                "id": 1,
                "question": "What gas do plants take in from the air?",
                "options": ["Oxygen", "Carbon Dioxide", "Nitrogen", "Helium"],
                "correct_answer": 1,
                "explanation": "Plants take in Carbon Dioxide (CO2) through their leaves to use as a carbon source.",
            },
            {
                "id": 2,
                "question": "Where does photosynthesis mainly take place?",
                "options": ["Roots", "Stems", "Leaves (Chloroplasts)", "Flowers"],
                "correct_answer": 2,
                "explanation": "It happens primarily in the leaves because they contain the most chloroplasts.",
            },
            {
                "id": 3,
                "question": "What is the main energy source for photosynthesis?",
                "options": ["Wind", "Soil", "Sunlight", "Water"],
                "correct_answer": 2,
                "explanation": "Sunlight provides the energy required to turn water and CO2 into glucose.",
            },
            {
                "id": 4,
                "question": "What is the 'food' produced by plants?",
                "options": ["Protein", "Glucose (Sugar)", "Fat", "Salt"],
                "correct_answer": 1,
                "explanation": "The product of photosynthesis is glucose, a simple sugar that plants use for energy.",
            },
            {
                "id": 5,
                "question": "What byproduct is released for us to breathe?",
                "options": ["Carbon Dioxide", "Oxygen", "Methane", "Argon"],
                "correct_answer": 1,
                "explanation": "Oxygen is released as a waste product of photosynthesis, essential for animal life.",
            },
        ],
    },
]

DEMO_QUIZ_HISTORY = [
    {"lesson_id": "old-1", "lesson_topic": "Thermodynamics", "score": 4, "total_questions": 5, "date": "2023-10-15"},
    {"lesson_id": "old-2", "lesson_topic": "Kinematics", "score": 3, "total_questions": 5, "date": "2023-10-20"},
    {"lesson_id": "old-3", "lesson_topic": "Organic Chemistry", "score": 5, "total_questions": 5, "date": "2023-10-25"},
    {"lesson_id": "demo-1", "lesson_topic": "Newton's 3rd Law", "score": 4, "total_questions": 5, "date": "2023-11-01"},
]

DEMO_STUDENTS = [
    {"id": "1", "name": "Alice Johnson", "usn": "1JK23CS001", "average_score": 88, "lessons_completed": 12, "attendance": 95},
    {"id": "2", "name": "Bob Smith", "usn": "1JK23CS002", "average_score": 72, "lessons_completed": 10, "attendance": 80},
    {"id": "3", "name": "Charlie Brown", "usn": "1JK23CS003", "average_score": 45, "lessons_completed": 5, "attendance": 60},
    {"id": "4", "name": "Diana Prince", "usn": "1JK23CS004", "average_score": 95, "lessons_completed": 15, "attendance": 100},
]
