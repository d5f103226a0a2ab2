"""Question Bank - Tabela de tópicos, gatilhos e questões modelo."""

# =============================================================================
# TOPIC KEYWORDS - Gatilhos (substrings, case-insensitive) por tópico
# =============================================================================

# A ordem dos tópicos define a ordem das questões na saída do classificador.
TOPIC_KEYWORDS: dict[str, list[str]] = {
    "Computer Science": ["computer science"],
    "Programming": ["programming"],
    "Data Structures": ["data structure", "stack", "queue", "linked list"],
    "Algorithms": ["algorithm"],
    "Software Engineering": ["sdlc", "software development"],
    "Database": ["database", "sql"],
    "AI/ML": ["artificial intelligence", "machine learning"],
}

# Tabela usada apenas para informar os tópicos detectados. É mais ampla que a
# de gatilhos: "sorting" ou "big o" contam como Algorithms, mas não incluem
# questões modelo.
TOPIC_DETECTION_KEYWORDS: dict[str, list[str]] = {
    "Programming": ["programming", "code", "syntax", "variables", "functions"],
    "Data Structures": ["array", "list", "stack", "queue", "tree", "graph"],
    "Algorithms": ["algorithm", "sorting", "searching", "complexity", "big o"],
    "Database": ["database", "sql", "query", "table", "relation"],
    "Networks": ["network", "protocol", "tcp", "ip", "internet"],
    "Security": ["security", "encryption", "authentication", "cybersecurity"],
    "AI/ML": ["artificial intelligence", "machine learning", "neural network"],
    "Software Engineering": ["sdlc", "testing", "debugging", "version control"],
}


# =============================================================================
# TOPIC QUESTIONS - Questões modelo por tópico
# =============================================================================

TOPIC_QUESTIONS: dict[str, list[dict]] = {
    "Computer Science": [
        {
            "type": "mcq",
            "question": "What is Computer Science primarily concerned with?",
            "options": [
                "Only hardware design",
                "Computational systems and their applications",
                "Only software development",
                "Only database management",
            ],
            "correct_answer": 1,
            "points": 2,
            "explanation": "Computer Science encompasses both theoretical foundations "
            "and practical applications of computational systems.",
        },
    ],
    "Programming": [
        {
            "type": "mcq",
            "question": "Which programming language is known for its simplicity and readability?",
            "options": ["C++", "Python", "Assembly", "Machine Code"],
            "correct_answer": 1,
            "points": 1,
            "explanation": "Python is widely recognized for its simple syntax and "
            "readability, making it ideal for beginners.",
        },
        {
            "type": "mcq",
            "question": "What is the primary use of JavaScript?",
            "options": [
                "System programming",
                "Web development",
                "Database management",
                "Hardware control",
            ],
            "correct_answer": 1,
            "points": 1,
            "explanation": "JavaScript is essential for web development, used for both "
            "frontend and backend development.",
        },
    ],
    "Data Structures": [
        {
            "type": "mcq",
            "question": "Which data structure follows the Last-In-First-Out (LIFO) principle?",
            "options": ["Queue", "Array", "Stack", "Linked List"],
            "correct_answer": 2,
            "points": 2,
            "explanation": "A stack is a LIFO data structure where the last element "
            "added is the first one to be removed.",
        },
        {
            "type": "mcq",
            "question": "What type of data structure is a tree?",
            "options": ["Linear", "Hierarchical", "Circular", "Random"],
            "correct_answer": 1,
            "points": 2,
            "explanation": "Trees are hierarchical data structures with a root node "
            "and child nodes forming a hierarchy.",
        },
    ],
    "Algorithms": [
        {
            "type": "mcq",
            "question": "What is used to measure algorithm efficiency?",
            "options": [
                "Big O notation",
                "Small o notation",
                "Theta notation",
                "All of the above",
            ],
            "correct_answer": 3,
            "points": 2,
            "explanation": "While Big O is most common, all these notations are used "
            "to analyze algorithm complexity.",
        },
        {
            "type": "mcq",
            "question": "Which of the following is a searching algorithm?",
            "options": ["Bubble Sort", "Binary Search", "Quick Sort", "Merge Sort"],
            "correct_answer": 1,
            "points": 1,
            "explanation": "Binary Search is an efficient searching algorithm that "
            "works on sorted arrays.",
        },
    ],
    "Software Engineering": [
        {
            "type": "mcq",
            "question": "What does SDLC stand for?",
            "options": [
                "Software Design Life Cycle",
                "System Development Life Cycle",
                "Software Development Life Cycle",
                "System Design Life Cycle",
            ],
            "correct_answer": 2,
            "points": 1,
            "explanation": "SDLC stands for Software Development Life Cycle, a process "
            "for developing software.",
        },
        {
            "type": "mcq",
            "question": "Which phase comes after Implementation in the SDLC?",
            "options": ["Design", "Testing", "Planning", "Analysis"],
            "correct_answer": 1,
            "points": 2,
            "explanation": "Testing phase follows Implementation to ensure the "
            "software works correctly.",
        },
    ],
    "Database": [
        {
            "type": "mcq",
            "question": "Which language is primarily used for database management?",
            "options": ["Python", "Java", "SQL", "C++"],
            "correct_answer": 2,
            "points": 1,
            "explanation": "SQL (Structured Query Language) is specifically designed "
            "for managing databases.",
        },
    ],
    "AI/ML": [
        {
            "type": "mcq",
            "question": "Which field focuses on creating systems that can learn and "
            "improve from experience?",
            "options": [
                "Database Systems",
                "Machine Learning",
                "Computer Networks",
                "Operating Systems",
            ],
            "correct_answer": 1,
            "points": 2,
            "explanation": "Machine Learning is specifically about creating systems "
            "that learn and improve from data and experience.",
        },
    ],
}


# =============================================================================
# FILLER QUESTIONS - Sempre incluídas, independentes do texto
# =============================================================================

FILLER_QUESTIONS: list[dict] = [
    {
        "type": "true-false",
        "question": "Arrays store elements at contiguous memory locations.",
        "options": ["True", "False"],
        "correct_answer": 0,
        "points": 1,
        "explanation": "Arrays do store elements in contiguous memory locations, "
        "which allows for efficient indexing.",
    },
    {
        "type": "true-false",
        "question": "A queue follows the Last-In-First-Out principle.",
        "options": ["True", "False"],
        "correct_answer": 1,
        "points": 1,
        "explanation": "A queue follows First-In-First-Out (FIFO) principle, not LIFO.",
    },
    {
        "type": "short-answer",
        "question": "Explain the difference between a stack and a queue data structure.",
        "correct_answer": "A stack follows LIFO (Last-In-First-Out) principle where "
        "elements are added and removed from the same end, while a queue follows FIFO "
        "(First-In-First-Out) principle where elements are added at one end and removed "
        "from the other end.",
        "points": 3,
        "explanation": "This demonstrates understanding of fundamental data structure "
        "principles.",
    },
]


# =============================================================================
# SAMPLE DOCUMENT - Texto retornado pelo extrator padrão
# =============================================================================

SAMPLE_COURSE_TEXT = """
Introduction to Computer Science

Computer Science is the study of computational systems and the design of computer
systems and their applications. It encompasses both the theoretical foundations of
computing and practical techniques for their implementation and application in
computer systems.

Key Areas of Computer Science:
1. Algorithms and Data Structures
2. Programming Languages
3. Computer Architecture
4. Operating Systems
5. Database Systems
6. Computer Networks
7. Software Engineering
8. Artificial Intelligence
9. Machine Learning
10. Cybersecurity

Programming Fundamentals:
Programming is the process of creating a set of instructions that tell a computer
how to perform a task. Programming languages provide a structured way to
communicate with computers.

Data Structures:
Data structures are ways of organizing and storing data so that they can be
accessed and worked with efficiently. Common data structures include arrays,
linked lists, stacks (LIFO), queues (FIFO), trees and graphs.

Algorithms:
An algorithm is a step-by-step procedure for solving a problem or completing a
task. Algorithm efficiency is measured using Big O notation.

Software Development Life Cycle (SDLC):
The SDLC is a process used by software development teams to design, develop, and
test high-quality software. The main phases include Planning, Analysis, Design,
Implementation, Testing, Deployment and Maintenance.
"""
