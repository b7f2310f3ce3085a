# chikitsamitra/config/knowledge_base_content.py
#
# Chatbot knowledge table. Entries are matched in order and the first entry
# with a keyword contained in the message wins, so more specific groups must
# stay ahead of broader ones that share a keyword.

from typing import Tuple
from chikitsamitra.models.knowledge import KnowledgeEntry

GREETING = "Hello! I'm ChikitsaMitra. How can I help you today?"

FALLBACK_RESPONSE = (
    "I understand you're asking about health concerns. For accurate medical advice, "
    "please consult with a healthcare professional. I can provide general health "
    "information and guide you to resources."
)

KNOWLEDGE_BASE: Tuple[KnowledgeEntry, ...] = (
    # Greetings & Meta
    KnowledgeEntry(
        ("hello", "hi", "hey"),
        "Hello! I'm here to help with your health questions. What would you like to know?",
    ),
    KnowledgeEntry(
        ("thanks", "thank you"),
        "You're welcome! Is there anything else I can help you with?",
    ),
    KnowledgeEntry(
        ("bye", "goodbye"),
        "Goodbye! Stay healthy.",
    ),
    KnowledgeEntry(
        ("what is chikitsamitra", "who are you"),
        "I am ChikitsaMitra, your AI Health Companion. I can provide general health guidance, answer your questions, and help you book appointments. Please remember, I am not a substitute for a real doctor.",
    ),
    KnowledgeEntry(
        ("symptoms", "i feel sick"),
        "I can try to provide general information based on symptoms. Please describe how you are feeling. However, for a proper diagnosis, it is always best to consult a healthcare professional.",
    ),

    # Common Complaints
    KnowledgeEntry(
        ("fever", "temperature", "high temp"),
        "For fever, ensure you stay hydrated, rest well, and monitor your temperature. If it persists beyond 3 days or exceeds 103°F (39.4°C), please consult a doctor.",
    ),
    KnowledgeEntry(
        ("headache", "migraine", "head hurts"),
        "For headaches, try resting in a quiet, dark room, staying hydrated, and using a cold compress. If severe or persistent, please consult a healthcare provider.",
    ),
    KnowledgeEntry(
        ("appointment", "book", "schedule"),
        "You can book hospital appointments through the 'Appointments' section in the main menu. Just fill in your details and select your preferred time slot.",
    ),
    KnowledgeEntry(
        ("cold", "cough", "sore throat", "runny nose"),
        "For common cold and cough, get plenty of rest, stay hydrated, and consider warm liquids like tea with honey. If symptoms worsen or persist beyond a week, consult a doctor.",
    ),
    KnowledgeEntry(
        ("stomach ache", "stomach pain", "belly hurts"),
        "For a mild stomach ache, try sipping water or a clear, non-caffeinated beverage. Avoid solid foods for a few hours. If the pain is severe or constant, seek medical attention.",
    ),
    KnowledgeEntry(
        ("diarrhea", "loose motion"),
        "For diarrhea, drink plenty of fluids like water, broth, or an oral rehydration solution (ORS) to prevent dehydration. Stick to a bland diet (like bananas, rice, applesauce, toast). See a doctor if it's severe or lasts more than two days.",
    ),
    KnowledgeEntry(
        ("constipation", "can't poop"),
        "To relieve constipation, increase your fiber intake with fruits and vegetables, drink plenty of water, and try to get some exercise. If it's a persistent problem, consult a doctor.",
    ),
    KnowledgeEntry(
        ("nausea", "vomiting", "throwing up", "puking"),
        "If you are feeling nauseous, try sipping clear fluids, avoiding strong smells, and eating small, bland meals. If vomiting persists for more than 24 hours or you see blood, see a doctor.",
    ),
    KnowledgeEntry(
        ("sprain", "strain", "twisted ankle", "pulled muscle"),
        "For sprains and strains, follow the R.I.C.E. principle: Rest, Ice (20 minutes at a time), Compression (with a bandage), and Elevation. If you can't put weight on it or the pain is severe, see a doctor.",
    ),
    KnowledgeEntry(
        ("cut", "wound", "bleeding"),
        "For a minor cut, apply gentle pressure with a clean cloth to stop the bleeding. Clean the wound with water and apply an antiseptic and a bandage. For deep wounds or heavy bleeding, seek medical help immediately.",
    ),
    KnowledgeEntry(
        ("burn", "scald"),
        "For a minor burn, run cool (not cold) water over the area for 10-15 minutes. Cover it with a sterile, non-stick bandage. Do not use ice or butter. For severe burns, call for emergency help.",
    ),
    KnowledgeEntry(
        ("allergy", "hives", "sneezing"),
        "For mild allergies, over-the-counter antihistamines can help. Try to identify and avoid your triggers. For severe reactions, like difficulty breathing, seek emergency medical care.",
    ),
    KnowledgeEntry(
        ("diabetes", "high blood sugar"),
        "Diabetes is a serious condition. Management involves monitoring blood sugar, a healthy diet, exercise, and often medication. Please consult a doctor for a proper diagnosis and management plan.",
    ),
    KnowledgeEntry(
        ("hypertension", "high blood pressure", "high bp"),
        "High blood pressure often has no symptoms. It's important to get it checked regularly. Management includes a low-salt diet, regular exercise, managing stress, and medication if prescribed by your doctor.",
    ),
    KnowledgeEntry(
        ("insomnia", "can't sleep", "sleep problem"),
        "To improve sleep, try to maintain a regular sleep schedule, create a relaxing bedtime routine, and avoid caffeine or heavy meals late at night. If insomnia persists, speak with a healthcare provider.",
    ),
    KnowledgeEntry(
        ("anxiety", "stress", "panic attack", "worried"),
        "For feelings of anxiety or stress, try deep breathing exercises, mindfulness, or light physical activity. If these feelings are overwhelming or interfere with your daily life, please talk to a mental health professional.",
    ),
    KnowledgeEntry(
        ("depression", "sad", "feeling down"),
        "It's important to talk to someone if you're feeling persistently sad or down. Please consider reaching out to a friend, family member, or a mental health professional. You are not alone.",
    ),
    KnowledgeEntry(
        ("acne", "pimples", "zits"),
        "To manage acne, keep your face clean, avoid touching it, and use over-the-counter products with benzoyl peroxide or salicylic acid. If it's severe, a dermatologist can help.",
    ),
    KnowledgeEntry(
        ("back pain", "backache"),
        "For mild back pain, try gentle stretching, using a hot or cold compress, and maintaining good posture. Over-the-counter pain relievers may help. If the pain is severe or chronic, see a doctor.",
    ),
    KnowledgeEntry(
        ("joint pain", "arthritis", "knee pain"),
        "For joint pain, rest the affected joint and apply ice or heat. Gentle exercise and maintaining a healthy weight can help manage conditions like arthritis. A doctor can provide a proper diagnosis.",
    ),
    KnowledgeEntry(
        ("dizzy", "dizziness", "lightheaded"),
        "If you feel dizzy, sit or lie down immediately. Drink some water. Dizziness can have many causes, from dehydration to more serious issues. If it's frequent or severe, consult a doctor.",
    ),
    KnowledgeEntry(
        ("fatigue", "tired", "exhausted", "no energy"),
        "Persistent fatigue can be a sign of many things, including poor sleep, stress, or an underlying medical condition. Ensure you're getting 7-8 hours of sleep, eating a balanced diet, and exercising. If it doesn't improve, see a doctor.",
    ),
    KnowledgeEntry(
        ("menstrual cramps", "period pain"),
        "To ease menstrual cramps, you can try a heating pad on your abdomen, gentle exercise, or over-the-counter pain relievers like ibuprofen. If the pain is debilitating, discuss it with your gynecologist.",
    ),
    KnowledgeEntry(
        ("pregnancy", "pregnant"),
        "If you think you might be pregnant, it's best to take a home pregnancy test and confirm with a doctor. Prenatal care is very important for a healthy pregnancy.",
    ),
    KnowledgeEntry(
        ("vaccine", "vaccination", "immunization"),
        "Vaccines are a safe and effective way to protect against serious diseases. It's important to stay up-to-date with your immunizations as recommended by your healthcare provider.",
    ),
    KnowledgeEntry(
        ("skin rash", "itchy skin"),
        "For a mild skin rash, keep the area clean and dry. An over-the-counter hydrocortisone cream or calamine lotion may relieve itching. If the rash spreads, is painful, or you have a fever, see a doctor.",
    ),
    KnowledgeEntry(
        ("heartburn", "acid reflux"),
        "To manage heartburn, try avoiding trigger foods (like spicy or fatty foods), eating smaller meals, and not lying down right after eating. Over-the-counter antacids can help. If it happens often, consult a doctor.",
    ),
    KnowledgeEntry(
        ("eye strain", "sore eyes", "blurry vision"),
        "If your eyes feel strained, try the 20-20-20 rule: every 20 minutes, look at something 20 feet away for 20 seconds. Ensure good lighting and take regular breaks from screens. If vision is blurry, see an optometrist.",
    ),
    KnowledgeEntry(
        ("dehydration", "thirsty"),
        "Signs of dehydration include dark yellow urine, thirst, and dizziness. Drink plenty of water throughout the day. Sports drinks or oral rehydration solutions can help if you've lost a lot of fluids.",
    ),

    # Common Illnesses
    KnowledgeEntry(
        ("flu", "influenza"),
        "Flu symptoms often include fever, body aches, cough, and fatigue. Rest, hydration, and over-the-counter flu medications are key. See a doctor if you have breathing difficulty or symptoms worsen.",
    ),
    KnowledgeEntry(
        ("strep throat",),
        "Strep throat causes a severe sore throat, fever, and swollen lymph nodes. It requires a doctor's diagnosis (a strep test) and is usually treated with antibiotics. See a doctor for a proper diagnosis.",
    ),
    KnowledgeEntry(
        ("pink eye", "conjunctivitis"),
        "Pink eye (conjunctivitis) causes red, itchy, and watery eyes, often with discharge. It can be viral, bacterial, or allergic. It's important to see a doctor to determine the cause and get the right treatment, such as antibiotic eye drops.",
    ),
    KnowledgeEntry(
        ("ear infection", "otitis media"),
        "Ear infections cause ear pain, fever, and sometimes difficulty hearing. They are common in children. While some resolve on their own, a doctor may prescribe antibiotics. Consult a doctor for pain relief and treatment.",
    ),
    KnowledgeEntry(
        ("bronchitis",),
        "Bronchitis is an inflammation of the bronchial tubes, causing a persistent cough (often with mucus), chest tightness, and wheezing. Rest, fluids, and a humidifier can help. See a doctor if your cough is severe or lasts for weeks.",
    ),
    KnowledgeEntry(
        ("pneumonia",),
        "Pneumonia is a serious lung infection with symptoms like high fever, chills, a cough with phlegm, and sharp chest pain. You must see a doctor immediately if you suspect pneumonia, as it often requires antibiotics or hospitalization.",
    ),
    KnowledgeEntry(
        ("sinus infection", "sinusitis"),
        "Sinusitis causes facial pain, a stuffy or runny nose, and headache. Nasal decongestants, saline rinses, and steam can help. If it lasts over a week or includes a high fever, see a doctor.",
    ),
    KnowledgeEntry(
        ("tonsillitis",),
        "Tonsillitis is inflammation of the tonsils, leading to a sore throat, red/swollen tonsils, and fever. Treatment depends on the cause (viral or bacterial). See a doctor for a diagnosis.",
    ),
    KnowledgeEntry(
        ("mono", "mononucleosis"),
        "Mononucleosis ('mono') causes extreme fatigue, fever, sore throat, and swollen lymph nodes. It's viral, so treatment involves rest and fluids, sometimes for several weeks. A doctor can confirm the diagnosis.",
    ),
    KnowledgeEntry(
        ("food poisoning",),
        "Food poisoning typically causes vomiting, diarrhea, and stomach cramps within hours of eating contaminated food. The main treatment is rehydration with water and electrolytes. See a doctor if you have a high fever, blood in your stool, or can't keep any liquids down.",
    ),
    KnowledgeEntry(
        ("gastroenteritis", "stomach flu"),
        "Gastroenteritis (stomach flu) is a viral infection causing watery diarrhea, cramps, nausea, and vomiting. It's different from influenza. Focus on rehydration with clear fluids. See a doctor if dehydration becomes severe.",
    ),
    KnowledgeEntry(
        ("chickenpox", "varicella"),
        "Chickenpox causes an itchy rash of fluid-filled blisters, along with fever and fatigue. Calamine lotion and oatmeal baths can soothe itching. It's highly contagious. A vaccine is available to prevent it.",
    ),
    KnowledgeEntry(
        ("shingles", "herpes zoster"),
        "Shingles is a painful rash caused by the same virus as chickenpox. It typically appears as a stripe of blisters on one side of the body. See a doctor immediately for antiviral medication, which can reduce the severity.",
    ),
    KnowledgeEntry(
        ("ringworm", "tinea"),
        "Ringworm is a fungal infection of the skin (not a worm) that causes a ring-shaped, itchy rash. Over-the-counter antifungal creams can treat it. Keep the area clean and dry. Consult a doctor if it doesn't improve.",
    ),
    KnowledgeEntry(
        ("athlete's foot", "tinea pedis"),
        "Athlete's foot is a fungal infection on the feet, causing itching, scaling, and redness. Keep feet dry, change socks often, and use over-the-counter antifungal powders or creams. See a doctor if it's persistent.",
    ),
    KnowledgeEntry(
        ("jock itch", "tinea cruris"),
        "Jock itch is a fungal infection in the groin area, causing an itchy, red rash. Treat it with antifungal creams and by keeping the area clean and dry. Wear loose-fitting cotton underwear.",
    ),

    # Injuries & First Aid
    KnowledgeEntry(
        ("broken bone", "fracture"),
        "If you suspect a broken bone (severe pain, swelling, inability to move the limb), immobilize the area, apply ice, and go to an emergency room or urgent care immediately for an X-ray and treatment.",
    ),
    KnowledgeEntry(
        ("concussion", "head injury"),
        "A concussion is a brain injury. Symptoms (headache, dizziness, confusion, nausea) may be delayed. After any head injury, it's crucial to be evaluated by a doctor. Rest is the primary treatment.",
    ),
    KnowledgeEntry(
        ("dislocated shoulder", "dislocation"),
        "A dislocation is when a bone is forced out of its socket. It is extremely painful and causes visible deformity. Do not try to pop it back in yourself. Go to the emergency room immediately.",
    ),
    KnowledgeEntry(
        ("cpr", "cardiopulmonary resuscitation"),
        "CPR is an emergency procedure. If you see someone collapse, first call for emergency help (like 112 or 911). Then, if you are trained, start chest compressions. If you are not trained, follow the dispatcher's instructions.",
    ),
    KnowledgeEntry(
        ("choking",),
        "If someone is choking and cannot cough or talk, perform the Heimlich maneuver (abdominal thrusts). Call for emergency help immediately. For babies, use back blows and chest thrusts.",
    ),
    KnowledgeEntry(
        ("seizure", "convulsion"),
        "If someone is having a seizure, ease them to the floor, turn them gently onto one side, and clear the area of hard objects. Do not put anything in their mouth. Call for emergency help if it's their first seizure or lasts over 5 minutes.",
    ),
    KnowledgeEntry(
        ("shock",),
        "Shock is a life-threatening condition caused by low blood flow. Symptoms include cold/clammy skin, rapid pulse, and confusion. Call emergency services immediately. Have the person lie down with feet elevated.",
    ),
    KnowledgeEntry(
        ("nosebleed", "epistaxis"),
        "For a nosebleed, sit and lean forward. Pinch your nostrils shut for 10-15 minutes. Do not lean back. If bleeding is heavy or doesn't stop after 20 minutes, seek medical attention.",
    ),
    KnowledgeEntry(
        ("insect sting", "bee sting"),
        "For a bee sting, remove the stinger by scraping it. Wash the area and apply a cold compress. Over-the-counter antihistamines can help itching. Seek emergency care for signs of an allergic reaction (difficulty breathing, swelling of the face or throat).",
    ),
    KnowledgeEntry(
        ("snake bite",),
        "A snake bite is a medical emergency. Call for help immediately. Keep the person calm and still, and position the bite below the level of the heart. Do not apply a tourniquet or try to suck out the venom.",
    ),
    KnowledgeEntry(
        ("jellyfish sting",),
        "For a jellyfish sting, rinse the area with vinegar (if available) or seawater. Do not use fresh water. Carefully remove any tentacles. Hot water immersion can help with pain. Seek medical help for severe reactions.",
    ),
    KnowledgeEntry(
        ("frostbite",),
        "Frostbite causes numbness and discolored skin (white, gray, or blue). Move to a warm place. Gradually rewarm the affected area with warm (not hot) water. Do not rub. Seek medical attention immediately.",
    ),
    KnowledgeEntry(
        ("heat stroke", "sunstroke"),
        "Heatstroke is a medical emergency. Symptoms include high fever (over 103°F), hot/red skin, and confusion. Call emergency services immediately. Move the person to a cool place and apply cool, wet cloths.",
    ),
    KnowledgeEntry(
        ("heat exhaustion",),
        "Heat exhaustion symptoms include heavy sweating, weakness, dizziness, and nausea. Move to a cool place, sip water, and loosen clothing. If symptoms don't improve or you show signs of heatstroke, get help.",
    ),
    KnowledgeEntry(
        ("hypothermia",),
        "Hypothermia is a dangerously low body temperature. Symptoms include shivering, confusion, and slurred speech. Call emergency services. Move the person to a warm, dry place and cover them with blankets.",
    ),

    # Skin Conditions
    KnowledgeEntry(
        ("eczema", "atopic dermatitis"),
        "Eczema causes dry, itchy, and inflamed skin. Keep skin moisturized with unscented emollients, avoid triggers (like certain soaps), and a doctor can prescribe steroid creams for flare-ups.",
    ),
    KnowledgeEntry(
        ("psoriasis",),
        "Psoriasis is an autoimmune condition causing thick, scaly, red patches on the skin. While there is no cure, a dermatologist can provide treatments like topical creams, light therapy, or medications to manage it.",
    ),
    KnowledgeEntry(
        ("rosacea",),
        "Rosacea causes facial redness, flushing, and sometimes bumps. Identifying and avoiding triggers (like spicy food, alcohol, sun) is key. A dermatologist can prescribe gels or medications to manage redness.",
    ),
    KnowledgeEntry(
        ("hives", "urticaria"),
        "Hives are raised, itchy welts on the skin, often from an allergic reaction. Over-the-counter antihistamines can help. Seek emergency care if you have hives with swelling of the face or difficulty breathing.",
    ),
    KnowledgeEntry(
        ("warts",),
        "Warts are skin growths caused by a virus. They are usually harmless. Over-the-counter treatments (salicylic acid) can work, or a dermatologist can remove them by freezing or other methods.",
    ),
    KnowledgeEntry(
        ("fungal nail infection", "onychomycosis"),
        "A fungal nail infection causes nails to become thick, yellow, and brittle. It's hard to treat. A doctor can prescribe oral antifungal medications or medicated nail polishes.",
    ),
    KnowledgeEntry(
        ("impetigo",),
        "Impetigo is a contagious bacterial skin infection, common in children, causing red sores or blisters. It requires a doctor's diagnosis and is treated with antibiotic creams or pills.",
    ),
    KnowledgeEntry(
        ("scabies",),
        "Scabies is caused by tiny mites that burrow into the skin, causing an intensely itchy rash. It is very contagious. A doctor must diagnose it and will prescribe a medicated cream to kill the mites.",
    ),
    KnowledgeEntry(
        ("sunburn",),
        "For sunburn, cool the skin with a damp cloth, apply aloe vera gel, and drink plenty of water. Over-the-counter pain relievers can help. Avoid further sun exposure. See a doctor for severe, blistering sunburn.",
    ),
    KnowledgeEntry(
        ("blister",),
        "For a friction blister, try not to pop it. Clean it and cover it with a bandage. If it pops, wash it, apply antiseptic, and cover it. See a doctor for signs of infection (pus, redness).",
    ),
    KnowledgeEntry(
        ("dandruff", "seborrheic dermatitis"),
        "Dandruff causes a flaky, itchy scalp. Use an over-the-counter medicated shampoo (with ingredients like ketoconazole, selenium sulfide, or zinc). See a dermatologist if it's severe.",
    ),
    KnowledgeEntry(
        ("hair loss", "alopecia"),
        "Hair loss can have many causes (genetics, stress, medical conditions). A dermatologist can help determine the cause and discuss treatment options, which may include medications or lifestyle changes.",
    ),
    KnowledgeEntry(
        ("cellulitis",),
        "Cellulitis is a serious bacterial skin infection causing a red, swollen, warm, and painful area of skin. You must see a doctor immediately. It is treated with antibiotics.",
    ),
    KnowledgeEntry(
        ("boil", "furuncle"),
        "A boil is a painful, pus-filled bump under the skin. Apply a warm compress to help it drain. Do not squeeze it. See a doctor if it's large, very painful, or you develop a fever.",
    ),
    KnowledgeEntry(
        ("moles", "check mole"),
        "Most moles are harmless. However, check your skin regularly. See a dermatologist if you notice a mole that is Asymmetrical, has an irregular Border, changes Color, has a large Diameter, or is Evolving (ABCDE).",
    ),

    # Digestive & Urinary
    KnowledgeEntry(
        ("ibs", "irritable bowel syndrome"),
        "IBS is a common disorder causing cramping, bloating, gas, diarrhea, and constipation. A doctor can help diagnose it and suggest management through diet (like a low-FODMAP diet), stress reduction, and medication.",
    ),
    KnowledgeEntry(
        ("gerd", "gastroesophageal reflux disease"),
        "GERD is chronic acid reflux. Management involves avoiding trigger foods, not eating before bed, and over-the-counter antacids. A doctor can prescribe stronger medications if needed.",
    ),
    KnowledgeEntry(
        ("ulcer", "peptic ulcer"),
        "A peptic ulcer is a sore in the lining of the stomach or intestine. Symptoms include burning stomach pain. It's often caused by H. pylori bacteria or NSAID use. See a doctor for diagnosis and treatment.",
    ),
    KnowledgeEntry(
        ("crohn's disease",),
        "Crohn's disease is an inflammatory bowel disease (IBD) causing severe diarrhea, abdominal pain, and weight loss. It requires long-term management by a gastroenterologist.",
    ),
    KnowledgeEntry(
        ("ulcerative colitis",),
        "Ulcerative colitis is an IBD that causes inflammation and ulcers in the large intestine. Symptoms include bloody diarrhea and abdominal pain. This is a serious condition that must be managed by a doctor.",
    ),
    KnowledgeEntry(
        ("gallstones",),
        "Gallstones can cause severe pain in the upper right abdomen, especially after a fatty meal. If you have sudden, intense abdominal pain, seek medical evaluation. Treatment may involve surgery.",
    ),
    KnowledgeEntry(
        ("hemorrhoids", "piles"),
        "Hhemorrhoids are swollen veins in the rectum, causing itching, pain, and sometimes bleeding. Over-the-counter creams, sitz baths, and a high-fiber diet can help. See a doctor if there is significant bleeding.",
    ),
    KnowledgeEntry(
        ("uti", "urinary tract infection"),
        "A UTI causes a burning feeling during urination, frequent urination, and cloudy urine. It's important to see a doctor for a diagnosis and antibiotics. Drink plenty of water.",
    ),
    KnowledgeEntry(
        ("kidney stones",),
        "Kidney stones cause excruciating, sharp pain in the back or side, often with nausea. Drink lots of water. See a doctor immediately. Some stones pass on their own, but others require medical procedures.",
    ),
    KnowledgeEntry(
        ("appendicitis",),
        "Appendicitis causes sudden, sharp pain that starts near the navel and moves to the lower right abdomen. It's a medical emergency that requires surgery. Go to the ER if you have these symptoms.",
    ),

    # Musculoskeletal
    KnowledgeEntry(
        ("sciatica",),
        "Sciatica is pain that radiates along the path of the sciatic nerve (from the lower back down the leg). Gentle stretching and heat/ice can help. See a doctor or physical therapist if it's severe or persistent.",
    ),
    KnowledgeEntry(
        ("carpal tunnel syndrome",),
        "Carpal tunnel causes numbness, tingling, and pain in the hand and wrist. A wrist splint, ergonomic adjustments, and stretches can help. A doctor can confirm the diagnosis.",
    ),
    KnowledgeEntry(
        ("plantar fasciitis",),
        "Plantar fasciitis causes stabbing pain in the heel, especially in the morning. Stretching, supportive shoes, and ice can help. A podiatrist or physical therapist can provide further treatment.",
    ),
    KnowledgeEntry(
        ("tendinitis",),
        "Tendinitis is inflammation of a tendon, causing pain and tenderness near a joint (e.g., tennis elbow, Achilles tendinitis). Rest and ice are key. Physical therapy can help strengthen the area.",
    ),
    KnowledgeEntry(
        ("bursitis",),
        "Bursitis is inflammation of the bursa sacs that cushion joints, often in the shoulder, hip, or elbow. It causes a dull, achy pain. Rest the joint and use ice. See a doctor if pain is severe.",
    ),
    KnowledgeEntry(
        ("gout",),
        "Gout is a type of arthritis causing sudden, severe attacks of pain, redness, and swelling, often in the big toe. It's caused by uric acid crystals. See a doctor for diagnosis and medication.",
    ),
    KnowledgeEntry(
        ("rheumatoid arthritis", "ra"),
        "Rheumatoid arthritis is an autoimmune disease causing painful, swollen, and stiff joints. It's different from osteoarthritis. It requires management by a rheumatologist.",
    ),
    KnowledgeEntry(
        ("osteoarthritis", "oa"),
        "Osteoarthritis is the 'wear and tear' arthritis that causes joint pain and stiffness, often in the knees, hips, or hands. Management includes exercise, maintaining a healthy weight, and pain relief.",
    ),
    KnowledgeEntry(
        ("osteoporosis",),
        "Osteoporosis is a condition where bones become weak and brittle. It's often 'silent' until a fracture occurs. A doctor can order a bone density scan. Weight-bearing exercise and calcium/Vitamin D are important.",
    ),
    KnowledgeEntry(
        ("fibromyalgia",),
        "Fibromyalgia is a chronic condition causing widespread pain, fatigue, and 'brain fog'. There is no cure, but a doctor can help manage symptoms through medication, exercise, and stress management.",
    ),

    # Women's Health
    KnowledgeEntry(
        ("yeast infection", "candida"),
        "A yeast infection causes itching, burning, and a thick white discharge. Over-the-counter antifungal creams can treat it, but it's good to see a doctor for a first-time diagnosis to be sure.",
    ),
    KnowledgeEntry(
        ("bacterial vaginosis", "bv"),
        "BV is a common infection caused by an imbalance of bacteria, often causing a fishy odor and thin discharge. It's important to see a doctor as it requires a prescription antibiotic.",
    ),
    KnowledgeEntry(
        ("pcos", "polycystic ovary syndrome"),
        "PCOS is a hormonal disorder that can cause irregular periods, acne, and other symptoms. If you have irregular cycles, it's important to see a gynecologist for evaluation and management.",
    ),
    KnowledgeEntry(
        ("endometriosis",),
        "Endometriosis is a condition where uterine-like tissue grows outside the uterus, causing very painful periods and pelvic pain. This requires a diagnosis and management plan from a gynecologist.",
    ),
    KnowledgeEntry(
        ("menopause",),
        "Menopause is the natural end of menstruation, usually in the 40s or 50s. Symptoms like hot flashes and night sweats are common. A doctor can discuss symptom management, including hormone therapy.",
    ),
    KnowledgeEntry(
        ("pms", "premenstrual syndrome"),
        "PMS causes symptoms like bloating, mood swings, and cramps before a period. Regular exercise, a healthy diet, and stress management can help. See a doctor if symptoms are severe.",
    ),
    KnowledgeEntry(
        ("breast lump", "check breast"),
        "It's important to be aware of how your breasts normally feel. If you find a new lump, or notice any skin dimpling, nipple discharge, or persistent pain, see a doctor promptly for an evaluation.",
    ),

    # Men's Health
    KnowledgeEntry(
        ("prostate", "bph", "enlarged prostate"),
        "An enlarged prostate (BPH) is common in older men and can cause urinary problems (frequent urination, weak stream). A doctor (urologist) can diagnose and manage this condition.",
    ),
    KnowledgeEntry(
        ("prostatitis",),
        "Prostatitis is inflammation of the prostate, which can cause painful urination and pelvic pain. It's important to see a doctor as it's often caused by a bacterial infection requiring antibiotics.",
    ),
    KnowledgeEntry(
        ("testicular pain", "check testicle"),
        "Sudden, severe testicular pain is a medical emergency (could be torsion) and you must go to the ER. For any lump, swelling, or dull ache, see a doctor promptly to get it checked.",
    ),
    KnowledgeEntry(
        ("ed", "erectile dysfunction"),
        "Erectile dysfunction is the inability to get or keep an erection. It has many possible causes (physical or psychological). It's important to talk to a doctor, as it can be a sign of other health issues.",
    ),

    # Children's Health
    KnowledgeEntry(
        ("teething",),
        "Teething can cause fussiness, drooling, and a desire to chew. A chilled (not frozen) teething ring or gently rubbing the gums can help. Avoid teething gels with benzocaine. A mild fever can occur, but a high fever is not from teething.",
    ),
    KnowledgeEntry(
        ("colic",),
        "Colic is defined as crying for more than 3 hours a day, 3 days a week, for at least 3 weeks in an otherwise healthy baby. It's very stressful but usually resolves on its own. Speak to your pediatrician for advice and support.",
    ),
    KnowledgeEntry(
        ("diaper rash",),
        "Diaper rash is a red, inflamed rash in the diaper area. Keep the area clean and dry, change diapers frequently, and use a zinc oxide barrier cream. See a doctor if it's severe or has blisters.",
    ),
    KnowledgeEntry(
        ("croup",),
        "Croup is a viral infection in young children causing a 'barking' cough and noisy breathing. Sitting in a steamy bathroom can help. See a doctor, or seek emergency care if the child is struggling to breathe.",
    ),
    KnowledgeEntry(
        ("hand foot and mouth disease", "hfm"),
        "HFM is a viral illness causing sores in the mouth and a rash on the hands and feet. It's common in children. Treatment involves pain relief (like acetaminophen) and fluids. It's very contagious.",
    ),
    KnowledgeEntry(
        ("measles",),
        "Measles is a highly contagious virus causing high fever, cough, and a distinctive red rash. It can be very serious. The MMR vaccine provides excellent protection. See a doctor immediately if you suspect measles.",
    ),
    KnowledgeEntry(
        ("mumps",),
        "Mumps is a virus causing fever, headache, and painfully swollen salivary glands (puffy cheeks). The MMR vaccine prevents it. Consult a doctor for diagnosis and care.",
    ),
    KnowledgeEntry(
        ("rubella", "german measles"),
        "Rubella is a viral infection causing a mild fever and rash. It's most dangerous for pregnant women. The MMR vaccine prevents it.",
    ),
    KnowledgeEntry(
        ("whooping cough", "pertussis"),
        "Whooping cough is a bacterial infection causing severe, uncontrollable coughing fits that end in a 'whooping' sound. It's very dangerous for babies. Vaccination is key. See a doctor immediately.",
    ),

    # Mental Health
    KnowledgeEntry(
        ("ptsd", "post traumatic stress"),
        "PTSD can develop after a traumatic event, causing flashbacks, nightmares, and severe anxiety. It is a treatable condition. Please seek help from a mental health professional.",
    ),
    KnowledgeEntry(
        ("ocd", "obsessive compulsive disorder"),
        "OCD involves unwanted, repetitive thoughts (obsessions) and behaviors (compulsions). It's a medical condition, not a personality quirk. Therapy, especially CBT, and medication can be very effective.",
    ),
    KnowledgeEntry(
        ("bipolar disorder",),
        "Bipolar disorder causes extreme mood swings between highs (mania) and lows (depression). It is a serious, long-term condition that requires management with a psychiatrist.",
    ),
    KnowledgeEntry(
        ("schizophrenia",),
        "Schizophrenia is a complex mental illness that affects how a person thinks, feels, and behaves. Symptoms can include delusions and hallucinations. It requires professional medical treatment.",
    ),
    KnowledgeEntry(
        ("eating disorder", "anorexia", "bulimia"),
        "Eating disorders are serious, life-threatening mental illnesses. If you or someone you know is struggling with their relationship with food and body image, please seek professional help from a doctor or therapist specializing in eating disorders.",
    ),
    KnowledgeEntry(
        ("add", "adhd", "attention deficit"),
        "ADHD is a neurodevelopmental disorder that can cause inattention, hyperactivity, and impulsivity. It's not just a childhood disorder. A professional evaluation can lead to a proper diagnosis and management plan.",
    ),
    KnowledgeEntry(
        ("autism", "asd"),
        "Autism Spectrum Disorder (ASD) is a developmental condition that affects communication and behavior. It's a spectrum, and every individual is different. Support and resources are available; a doctor can provide a referral for evaluation.",
    ),

    # Chronic & Autoimmune
    KnowledgeEntry(
        ("lupus",),
        "Lupus is a chronic autoimmune disease that can cause inflammation and pain in any part of the body. Symptoms often include fatigue, joint pain, and a 'butterfly' rash on the face. It must be managed by a rheumatologist.",
    ),
    KnowledgeEntry(
        ("ms", "multiple sclerosis"),
        "Multiple Sclerosis is an autoimmune disease that affects the central nervous system. Symptoms can include numbness, weakness, vision problems, and fatigue. It requires diagnosis and long-term care from a neurologist.",
    ),
    KnowledgeEntry(
        ("thyroid", "hypothyroidism", "hyperthyroidism"),
        "The thyroid gland controls metabolism. Hypothyroidism (underactive) can cause fatigue and weight gain. Hyperthyroidism (overactive) can cause weight loss and anxiety. A doctor can diagnose this with a simple blood test.",
    ),
    KnowledgeEntry(
        ("anemia", "iron deficiency"),
        "Anemia is a lack of red blood cells, often causing fatigue, weakness, and pale skin. It can be caused by iron deficiency. A doctor can confirm this with a blood test and recommend supplements or dietary changes.",
    ),
    KnowledgeEntry(
        ("celiac disease",),
        "Celiac disease is an autoimmune disorder where eating gluten (a protein in wheat) damages the small intestine. Symptoms include digestive issues and fatigue. Diagnosis requires a doctor, and treatment is a strict gluten-free diet.",
    ),
    KnowledgeEntry(
        ("type 1 diabetes",),
        "Type 1 diabetes is an autoimmune condition where the body does not produce insulin. It is different from Type 2 and requires lifelong insulin therapy. It must be managed with a doctor (endocrinologist).",
    ),
    KnowledgeEntry(
        ("hiv", "aids"),
        "HIV is a virus that attacks the immune system. With modern antiretroviral therapy (ART), people with HIV can live long, healthy lives. AIDS is the late stage of HIV infection. It's crucial to get tested and, if positive, start treatment.",
    ),

    # Sensory
    KnowledgeEntry(
        ("tinnitus", "ringing in ears"),
        "Tinnitus is a ringing, buzzing, or hissing sound in the ears. It can be caused by noise exposure or underlying conditions. An audiologist or ENT (ear, nose, throat) doctor can evaluate it.",
    ),
    KnowledgeEntry(
        ("vertigo",),
        "Vertigo is a sensation of spinning or dizziness. It's often caused by an inner ear problem. A doctor can help determine the cause and may prescribe medication or specific exercises (like the Epley maneuver).",
    ),
    KnowledgeEntry(
        ("glaucoma",),
        "Glaucoma is an eye condition that damages the optic nerve, often due to high pressure in the eye. It usually has no early symptoms. Regular eye exams are crucial to catch it early and prevent vision loss.",
    ),
    KnowledgeEntry(
        ("cataracts",),
        "Cataracts are a clouding of the eye's natural lens, causing blurry or dim vision. It's very common with aging. An ophthalmologist can diagnose it, and it can be corrected with a common surgery.",
    ),
    KnowledgeEntry(
        ("macular degeneration", "amd"),
        "AMD is an eye disease that causes progressive loss of central vision, making it hard to read or see faces. Regular eye exams are key. A doctor can discuss management options.",
    ),
    KnowledgeEntry(
        ("dry eyes",),
        "Dry eyes can cause a gritty, stinging, or burning sensation. Over-the-counter lubricating eye drops (artificial tears) can help. Avoid fans blowing on your face and take breaks from screens.",
    ),
    KnowledgeEntry(
        ("stye",),
        "A stye is a red, painful lump near the edge of the eyelid. Apply a warm, wet compress for 10-15 minutes, several times a day. Do not squeeze it. See a doctor if it doesn't improve.",
    ),
    KnowledgeEntry(
        ("earwax blockage", "cerumen"),
        "Earwax blockage can cause muffled hearing. Do not use cotton swabs. Over-the-counter earwax softening drops can help. A doctor can safely remove a large blockage.",
    ),

    # Respiratory & Cardiovascular
    KnowledgeEntry(
        ("asthma",),
        "Asthma is a chronic condition that narrows the airways, causing wheezing, coughing, and shortness of breath. It's managed with inhalers (a 'reliever' for attacks and a 'preventer' for control). A doctor must diagnose and manage this.",
    ),
    KnowledgeEntry(
        ("copd", "chronic obstructive pulmonary disease"),
        "COPD is a chronic lung disease (like emphysema or chronic bronchitis) that makes it hard to breathe, usually caused by smoking. It requires medical management. Quitting smoking is the most important step.",
    ),
    KnowledgeEntry(
        ("heart attack", "myocardial infarction"),
        "A heart attack is a medical emergency. Symptoms include chest pain (pressure, tightness), pain in the arm/jaw, shortness of breath, and nausea. Call for emergency help immediately.",
    ),
    KnowledgeEntry(
        ("stroke",),
        "A stroke is a medical emergency. Use the F.A.S.T. acronym: Face drooping, Arm weakness, Speech difficulty, Time to call for help. Call emergency services immediately.",
    ),
    KnowledgeEntry(
        ("cholesterol", "high cholesterol"),
        "High cholesterol increases the risk of heart disease. It has no symptoms. A doctor can check it with a blood test. It's managed with diet, exercise, and sometimes medication.",
    ),
    KnowledgeEntry(
        ("dvt", "deep vein thrombosis"),
        "DVT is a blood clot in a deep vein, usually in the leg, causing pain and swelling. It's serious because the clot can travel to the lungs. See a doctor immediately if you suspect a DVT.",
    ),
    KnowledgeEntry(
        ("varicose veins",),
        "Varicose veins are swollen, twisted veins, usually in the legs. They can be a cosmetic concern or cause aching pain. Compression stockings, exercise, and elevating the legs can help.",
    ),
    KnowledgeEntry(
        ("arrhythmia", "palpitations", "irregular heartbeat"),
        "Palpitations (a feeling of a fluttering or racing heart) can be harmless, but they can also be a sign of an arrhythmia (irregular heartbeat). See a doctor to get an evaluation, especially if you also feel dizzy or short of breath.",
    ),

    # Procedures & General Health
    KnowledgeEntry(
        ("blood test", "blood work"),
        "A blood test is a common diagnostic tool. A doctor orders it to check for various conditions, like infection, anemia, or organ function. It's usually a very safe and quick procedure.",
    ),
    KnowledgeEntry(
        ("mri", "magnetic resonance imaging"),
        "An MRI uses a large magnet and radio waves to create detailed images of organs and tissues. It's painless but can be loud. It's used to diagnose many conditions, from joint injuries to brain tumors.",
    ),
    KnowledgeEntry(
        ("ct scan", "cat scan"),
        "A CT scan (Computed Tomography) uses X-rays from different angles to create cross-sectional images (slices) of the body. It's faster than an MRI and good for viewing bones, blood vessels, and soft tissues.",
    ),
    KnowledgeEntry(
        ("x-ray",),
        "An X-ray is a quick, painless test that uses radiation to create images of the inside of your body, primarily your bones. It's used to diagnose fractures, pneumonia, and other issues.",
    ),
    KnowledgeEntry(
        ("ultrasound", "sonogram"),
        "An ultrasound uses high-frequency sound waves to create live images of the inside of the body. It's commonly used during pregnancy and to look at organs like the heart, liver, and kidneys. It is very safe.",
    ),
    KnowledgeEntry(
        ("biopsy",),
        "A biopsy is a medical procedure where a small sample of tissue is removed from the body to be examined under a microscope. It's the most reliable way to diagnose many conditions, including cancer.",
    ),
    KnowledgeEntry(
        ("antibiotics",),
        "Antibiotics are powerful medicines that fight bacterial infections. They do not work on viruses (like the cold or flu). It's crucial to take the full course as prescribed by your doctor.",
    ),
    KnowledgeEntry(
        ("painkillers", "pain relievers"),
        "Over-the-counter pain relievers include acetaminophen and NSAIDs (like ibuprofen). They are effective but have risks. Follow the dosage instructions and ask a doctor or pharmacist if you're unsure.",
    ),
    KnowledgeEntry(
        ("probiotics",),
        "Probiotics are 'good' bacteria, often found in yogurt and fermented foods, that may help with digestive health. They are generally safe, but their benefits can vary. Consult a doctor for specific health issues.",
    ),
    KnowledgeEntry(
        ("vitamins", "supplements"),
        "Most people get all the vitamins they need from a balanced diet. A doctor can test for deficiencies (like Vitamin D or B12) and recommend supplements if you are deficient.",
    ),
    KnowledgeEntry(
        ("diet", "healthy eating"),
        "A healthy diet generally includes plenty of fruits, vegetables, whole grains, and lean protein. Try to limit processed foods, sugar, and saturated fats. For specific dietary plans, consult a doctor or registered dietitian.",
    ),
    KnowledgeEntry(
        ("exercise", "physical activity"),
        "Regular exercise (like 30 minutes of walking most days) has enormous health benefits for your heart, muscles, bones, and mental health. Start slowly and choose activities you enjoy.",
    ),
    KnowledgeEntry(
        ("hydration", "drink water"),
        "Staying hydrated is crucial for energy levels, brain function, and overall health. Aim to drink water throughout the day. Your urine should be a pale yellow color.",
    ),
    KnowledgeEntry(
        ("smoking", "quit smoking"),
        "Smoking is extremely harmful to nearly every organ in the body. Quitting is the single best thing you can do for your health. There are many resources to help, including patches, gum, and counseling. Ask your doctor for help.",
    ),
    KnowledgeEntry(
        ("alcohol",),
        "Moderate alcohol consumption may be okay for some, but excessive drinking is very harmful to the liver, heart, and brain. It's important to be honest with your doctor about your alcohol use.",
    ),
)
