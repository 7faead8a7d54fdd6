"""Static multiple-choice question catalog loaded by the seed runner.

Entries are plain dicts keyed by ``Question`` column names; ``load_catalog``
validates them before they reach the store.
"""
from quizbank.schemas.question import QuestionSchema

TOPICS = ["algebra", "geometry", "statistics", "probability", "number_systems"]

QUESTIONS = [
    # Algebra (15 questions)
    dict(
        question_text="Solve for x: 2x + 5 = 13",
        question_latex="2x + 5 = 13",
        option_a="x = 3",
        option_b="x = 4",
        option_c="x = 5",
        option_d="x = 6",
        correct_answer="B",
        topic="algebra",
        difficulty_level=1,
        explanation="Subtract 5 from both sides: 2x = 8. Divide by 2: x = 4.",
    ),
    dict(
        question_text="Simplify: 3(x + 2) - 2(x - 1)",
        question_latex="3(x + 2) - 2(x - 1)",
        option_a="x + 4",
        option_b="x + 8",
        option_c="x + 6",
        option_d="5x + 4",
        correct_answer="B",
        topic="algebra",
        difficulty_level=2,
        explanation="Expand: 3x + 6 - 2x + 2. Combine like terms: x + 8.",
    ),
    dict(
        question_text="What is the value of x² when x = -3?",
        question_latex="x^2 \\text{ when } x = -3",
        option_a="-9",
        option_b="9",
        option_c="-6",
        option_d="6",
        correct_answer="B",
        topic="algebra",
        difficulty_level=1,
        explanation="Square of -3 is (-3)² = (-3) × (-3) = 9. Negative times negative equals positive.",
    ),
    dict(
        question_text="Factor: x² + 5x + 6",
        question_latex="x^2 + 5x + 6",
        option_a="(x + 2)(x + 3)",
        option_b="(x + 1)(x + 6)",
        option_c="(x - 2)(x - 3)",
        option_d="(x + 4)(x + 1)",
        correct_answer="A",
        topic="algebra",
        difficulty_level=2,
        explanation="Find two numbers that multiply to 6 and add to 5: 2 and 3. Therefore (x + 2)(x + 3).",
    ),
    dict(
        question_text="Solve: (x/2) + 3 = 7",
        question_latex="\\frac{x}{2} + 3 = 7",
        option_a="x = 6",
        option_b="x = 8",
        option_c="x = 10",
        option_d="x = 4",
        correct_answer="B",
        topic="algebra",
        difficulty_level=1,
        explanation="Subtract 3 from both sides: x/2 = 4. Multiply by 2: x = 8.",
    ),
    dict(
        question_text="Simplify: √(16x²)",
        question_latex="\\sqrt{16x^2}",
        option_a="4x",
        option_b="8x",
        option_c="4x²",
        option_d="16x",
        correct_answer="A",
        topic="algebra",
        difficulty_level=2,
        explanation="Square root of 16 is 4, square root of x² is x. Result: 4x.",
    ),
    dict(
        question_text="If 3x - 7 = 14, what is x?",
        question_latex="3x - 7 = 14",
        option_a="x = 5",
        option_b="x = 6",
        option_c="x = 7",
        option_d="x = 8",
        correct_answer="C",
        topic="algebra",
        difficulty_level=1,
        explanation="Add 7 to both sides: 3x = 21. Divide by 3: x = 7.",
    ),
    dict(
        question_text="Expand: (x + 3)²",
        question_latex="(x + 3)^2",
        option_a="x² + 6x + 9",
        option_b="x² + 9",
        option_c="x² + 3x + 9",
        option_d="x² + 6x + 6",
        correct_answer="A",
        topic="algebra",
        difficulty_level=2,
        explanation="Use (a + b)² = a² + 2ab + b². Result: x² + 2(3)x + 9 = x² + 6x + 9.",
    ),
    dict(
        question_text="Solve for y: 2y/3 = 8",
        question_latex="\\frac{2y}{3} = 8",
        option_a="y = 10",
        option_b="y = 11",
        option_c="y = 12",
        option_d="y = 13",
        correct_answer="C",
        topic="algebra",
        difficulty_level=2,
        explanation="Multiply both sides by 3: 2y = 24. Divide by 2: y = 12.",
    ),
    dict(
        question_text="What is the slope of the line y = 3x + 2?",
        question_latex="y = 3x + 2",
        option_a="2",
        option_b="3",
        option_c="5",
        option_d="1",
        correct_answer="B",
        topic="algebra",
        difficulty_level=1,
        explanation="In y = mx + b form, m is the slope. Here m = 3.",
    ),
    dict(
        question_text="Simplify: 2x² + 3x² - x²",
        question_latex="2x^2 + 3x^2 - x^2",
        option_a="3x²",
        option_b="4x²",
        option_c="5x²",
        option_d="6x²",
        correct_answer="B",
        topic="algebra",
        difficulty_level=1,
        explanation="Combine like terms: (2 + 3 - 1)x² = 4x².",
    ),
    dict(
        question_text="Factor: x² - 9",
        question_latex="x^2 - 9",
        option_a="(x - 3)(x - 3)",
        option_b="(x + 3)(x + 3)",
        option_c="(x - 3)(x + 3)",
        option_d="Cannot be factored",
        correct_answer="C",
        topic="algebra",
        difficulty_level=2,
        explanation="Difference of squares: a² - b² = (a - b)(a + b). Here: (x - 3)(x + 3).",
    ),
    dict(
        question_text="If f(x) = 2x + 1, what is f(3)?",
        question_latex="f(x) = 2x + 1, f(3) = ?",
        option_a="5",
        option_b="6",
        option_c="7",
        option_d="8",
        correct_answer="C",
        topic="algebra",
        difficulty_level=1,
        explanation="Substitute x = 3: f(3) = 2(3) + 1 = 6 + 1 = 7.",
    ),
    dict(
        question_text="Solve: x² = 25",
        question_latex="x^2 = 25",
        option_a="x = 5 only",
        option_b="x = -5 only",
        option_c="x = ±5",
        option_d="x = 25",
        correct_answer="C",
        topic="algebra",
        difficulty_level=2,
        explanation="Take square root of both sides: x = ±√25 = ±5.",
    ),
    dict(
        question_text="Simplify: (2x³)(3x²)",
        question_latex="(2x^3)(3x^2)",
        option_a="5x⁵",
        option_b="6x⁵",
        option_c="6x⁶",
        option_d="5x⁶",
        correct_answer="B",
        topic="algebra",
        difficulty_level=2,
        explanation="Multiply coefficients: 2 × 3 = 6. Add exponents: x³⁺² = x⁵. Result: 6x⁵.",
    ),

    # Geometry (15 questions)
    dict(
        question_text="What is the area of a rectangle with length 8 and width 5?",
        question_latex="A = l \\times w, l = 8, w = 5",
        option_a="13",
        option_b="26",
        option_c="40",
        option_d="80",
        correct_answer="C",
        topic="geometry",
        difficulty_level=1,
        explanation="Area of rectangle = length × width = 8 × 5 = 40 square units.",
    ),
    dict(
        question_text="What is the perimeter of a square with side length 6?",
        question_latex="P = 4s, s = 6",
        option_a="12",
        option_b="18",
        option_c="24",
        option_d="36",
        correct_answer="C",
        topic="geometry",
        difficulty_level=1,
        explanation="Perimeter of square = 4 × side = 4 × 6 = 24 units.",
    ),
    dict(
        question_text="What is the area of a circle with radius 3? (Use π ≈ 3.14)",
        question_latex="A = \\pi r^2, r = 3",
        option_a="9.42",
        option_b="18.84",
        option_c="28.26",
        option_d="37.68",
        correct_answer="C",
        topic="geometry",
        difficulty_level=2,
        explanation="Area = πr² = 3.14 × 3² = 3.14 × 9 = 28.26 square units.",
    ),
    dict(
        question_text="What is the sum of angles in a triangle?",
        question_latex="\\text{Sum of angles in triangle}",
        option_a="90°",
        option_b="180°",
        option_c="270°",
        option_d="360°",
        correct_answer="B",
        topic="geometry",
        difficulty_level=1,
        explanation="The sum of all interior angles in any triangle is always 180°.",
    ),
    dict(
        question_text="What is the area of a triangle with base 10 and height 6?",
        question_latex="A = \\frac{1}{2}bh, b = 10, h = 6",
        option_a="16",
        option_b="30",
        option_c="60",
        option_d="120",
        correct_answer="B",
        topic="geometry",
        difficulty_level=1,
        explanation="Area = (1/2) × base × height = (1/2) × 10 × 6 = 30 square units.",
    ),
    dict(
        question_text="What is the circumference of a circle with radius 5? (Use π ≈ 3.14)",
        question_latex="C = 2\\pi r, r = 5",
        option_a="15.7",
        option_b="25.12",
        option_c="31.4",
        option_d="78.5",
        correct_answer="C",
        topic="geometry",
        difficulty_level=2,
        explanation="Circumference = 2πr = 2 × 3.14 × 5 = 31.4 units.",
    ),
    dict(
        question_text="In a right triangle, if one angle is 90° and another is 30°, what is the third angle?",
        question_latex="90° + 30° + x = 180°",
        option_a="45°",
        option_b="50°",
        option_c="60°",
        option_d="70°",
        correct_answer="C",
        topic="geometry",
        difficulty_level=1,
        explanation="Sum of angles = 180°. Third angle = 180° - 90° - 30° = 60°.",
    ),
    dict(
        question_text="What is the volume of a cube with side length 4?",
        question_latex="V = s^3, s = 4",
        option_a="12",
        option_b="16",
        option_c="48",
        option_d="64",
        correct_answer="D",
        topic="geometry",
        difficulty_level=2,
        explanation="Volume of cube = side³ = 4³ = 64 cubic units.",
    ),
    dict(
        question_text="What is the diagonal of a square with side length 5? (Use √2 ≈ 1.414)",
        question_latex="d = s\\sqrt{2}, s = 5",
        option_a="5",
        option_b="7.07",
        option_c="10",
        option_d="25",
        correct_answer="B",
        topic="geometry",
        difficulty_level=3,
        explanation="Diagonal = side × √2 = 5 × 1.414 = 7.07 units.",
    ),
    dict(
        question_text="What is the area of a trapezoid with bases 6 and 10, and height 4?",
        question_latex="A = \\frac{1}{2}(b_1 + b_2)h",
        option_a="28",
        option_b="32",
        option_c="36",
        option_d="40",
        correct_answer="B",
        topic="geometry",
        difficulty_level=2,
        explanation="Area = (1/2)(b₁ + b₂)h = (1/2)(6 + 10)(4) = (1/2)(16)(4) = 32 square units.",
    ),
    dict(
        question_text="How many sides does a hexagon have?",
        question_latex="\\text{Hexagon sides}",
        option_a="5",
        option_b="6",
        option_c="7",
        option_d="8",
        correct_answer="B",
        topic="geometry",
        difficulty_level=1,
        explanation="A hexagon is a polygon with 6 sides.",
    ),
    dict(
        question_text="What is the surface area of a cube with side length 3?",
        question_latex="SA = 6s^2, s = 3",
        option_a="27",
        option_b="36",
        option_c="54",
        option_d="81",
        correct_answer="C",
        topic="geometry",
        difficulty_level=2,
        explanation="Surface area = 6 × side² = 6 × 3² = 6 × 9 = 54 square units.",
    ),
    dict(
        question_text="What is the volume of a rectangular prism with length 5, width 3, and height 2?",
        question_latex="V = l \\times w \\times h",
        option_a="10",
        option_b="15",
        option_c="30",
        option_d="60",
        correct_answer="C",
        topic="geometry",
        difficulty_level=2,
        explanation="Volume = length × width × height = 5 × 3 × 2 = 30 cubic units.",
    ),
    dict(
        question_text="What is the measure of each interior angle of a regular pentagon?",
        question_latex="\\frac{(n-2) \\times 180°}{n}, n = 5",
        option_a="90°",
        option_b="108°",
        option_c="120°",
        option_d="135°",
        correct_answer="B",
        topic="geometry",
        difficulty_level=3,
        explanation="Interior angle = [(n-2) × 180°]/n = [(5-2) × 180°]/5 = 540°/5 = 108°.",
    ),
    dict(
        question_text="What is the area of a parallelogram with base 8 and height 5?",
        question_latex="A = b \\times h, b = 8, h = 5",
        option_a="13",
        option_b="26",
        option_c="40",
        option_d="80",
        correct_answer="C",
        topic="geometry",
        difficulty_level=2,
        explanation="Area of parallelogram = base × height = 8 × 5 = 40 square units.",
    ),

    # Statistics (10 questions)
    dict(
        question_text="What is the mean of the numbers: 2, 4, 6, 8, 10?",
        question_latex="\\text{Mean} = \\frac{2 + 4 + 6 + 8 + 10}{5}",
        option_a="5",
        option_b="6",
        option_c="7",
        option_d="8",
        correct_answer="B",
        topic="statistics",
        difficulty_level=1,
        explanation="Mean = sum of values / count = (2+4+6+8+10)/5 = 30/5 = 6.",
    ),
    dict(
        question_text="What is the median of: 3, 7, 2, 9, 5?",
        question_latex="\\text{Median of } 3, 7, 2, 9, 5",
        option_a="3",
        option_b="5",
        option_c="7",
        option_d="9",
        correct_answer="B",
        topic="statistics",
        difficulty_level=2,
        explanation="Sort the numbers: 2, 3, 5, 7, 9. The middle value (median) is 5.",
    ),
    dict(
        question_text="What is the mode of: 2, 3, 3, 4, 5, 5, 5, 6?",
        question_latex="\\text{Mode of } 2, 3, 3, 4, 5, 5, 5, 6",
        option_a="3",
        option_b="4",
        option_c="5",
        option_d="6",
        correct_answer="C",
        topic="statistics",
        difficulty_level=1,
        explanation="Mode is the most frequently occurring value. 5 appears 3 times, more than any other number.",
    ),
    dict(
        question_text="What is the range of: 10, 15, 20, 25, 30?",
        question_latex="\\text{Range} = \\text{max} - \\text{min}",
        option_a="15",
        option_b="20",
        option_c="25",
        option_d="30",
        correct_answer="B",
        topic="statistics",
        difficulty_level=1,
        explanation="Range = maximum - minimum = 30 - 10 = 20.",
    ),
    dict(
        question_text="What is the mean of: 5, 10, 15?",
        question_latex="\\text{Mean} = \\frac{5 + 10 + 15}{3}",
        option_a="8",
        option_b="9",
        option_c="10",
        option_d="11",
        correct_answer="C",
        topic="statistics",
        difficulty_level=1,
        explanation="Mean = (5 + 10 + 15) / 3 = 30 / 3 = 10.",
    ),
    dict(
        question_text="What is the median of: 1, 2, 3, 4, 5, 6?",
        question_latex="\\text{Median of } 1, 2, 3, 4, 5, 6",
        option_a="3",
        option_b="3.5",
        option_c="4",
        option_d="4.5",
        correct_answer="B",
        topic="statistics",
        difficulty_level=2,
        explanation="For even count, median = average of two middle values = (3 + 4) / 2 = 3.5.",
    ),
    dict(
        question_text="If the mean of 4 numbers is 10, what is their sum?",
        question_latex="\\text{Mean} = 10, n = 4",
        option_a="14",
        option_b="20",
        option_c="30",
        option_d="40",
        correct_answer="D",
        topic="statistics",
        difficulty_level=2,
        explanation="Sum = mean × count = 10 × 4 = 40.",
    ),
    dict(
        question_text="What is the mode of: 1, 2, 2, 3, 3, 4?",
        question_latex="\\text{Mode of } 1, 2, 2, 3, 3, 4",
        option_a="1",
        option_b="2 and 3",
        option_c="3",
        option_d="No mode",
        correct_answer="B",
        topic="statistics",
        difficulty_level=2,
        explanation="Both 2 and 3 appear twice (most frequent). This is a bimodal distribution.",
    ),
    dict(
        question_text="What percentage is 25 out of 100?",
        question_latex="\\frac{25}{100} \\times 100\\%",
        option_a="20%",
        option_b="25%",
        option_c="30%",
        option_d="35%",
        correct_answer="B",
        topic="statistics",
        difficulty_level=1,
        explanation="Percentage = (part/whole) × 100 = (25/100) × 100 = 25%.",
    ),
    dict(
        question_text="If a dataset has values 10, 20, 30, 40, what is the mean?",
        question_latex="\\text{Mean} = \\frac{10 + 20 + 30 + 40}{4}",
        option_a="20",
        option_b="25",
        option_c="30",
        option_d="35",
        correct_answer="B",
        topic="statistics",
        difficulty_level=1,
        explanation="Mean = (10 + 20 + 30 + 40) / 4 = 100 / 4 = 25.",
    ),

    # Probability (10 questions)
    dict(
        question_text="What is the probability of flipping heads on a fair coin?",
        question_latex="P(\\text{heads}) = ?",
        option_a="0",
        option_b="0.25",
        option_c="0.5",
        option_d="1",
        correct_answer="C",
        topic="probability",
        difficulty_level=1,
        explanation="A fair coin has 2 equally likely outcomes. P(heads) = 1/2 = 0.5.",
    ),
    dict(
        question_text="What is the probability of rolling a 3 on a standard die?",
        question_latex="P(3) = ?",
        option_a="1/6",
        option_b="1/3",
        option_c="1/2",
        option_d="1",
        correct_answer="A",
        topic="probability",
        difficulty_level=1,
        explanation="A die has 6 faces. Probability of any single number = 1/6.",
    ),
    dict(
        question_text="What is the probability of drawing a heart from a standard deck of 52 cards?",
        question_latex="P(\\text{heart}) = ?",
        option_a="1/13",
        option_b="1/4",
        option_c="1/2",
        option_d="13/52",
        correct_answer="B",
        topic="probability",
        difficulty_level=2,
        explanation="There are 13 hearts in 52 cards. P(heart) = 13/52 = 1/4.",
    ),
    dict(
        question_text="If you flip two coins, what is the probability both are heads?",
        question_latex="P(HH) = ?",
        option_a="1/2",
        option_b="1/3",
        option_c="1/4",
        option_d="1/8",
        correct_answer="C",
        topic="probability",
        difficulty_level=2,
        explanation="P(H) = 1/2 for each coin. P(HH) = (1/2) × (1/2) = 1/4.",
    ),
    dict(
        question_text="What is the probability of rolling an even number on a die?",
        question_latex="P(\\text{even}) = ?",
        option_a="1/6",
        option_b="1/3",
        option_c="1/2",
        option_d="2/3",
        correct_answer="C",
        topic="probability",
        difficulty_level=1,
        explanation="Even numbers on a die: 2, 4, 6 (3 outcomes). P(even) = 3/6 = 1/2.",
    ),
    dict(
        question_text="How many ways can you arrange 3 different books?",
        question_latex="3! = ?",
        option_a="3",
        option_b="6",
        option_c="9",
        option_d="12",
        correct_answer="B",
        topic="probability",
        difficulty_level=2,
        explanation="Number of arrangements = 3! = 3 × 2 × 1 = 6.",
    ),
    dict(
        question_text="What is the probability of NOT rolling a 6 on a die?",
        question_latex="P(\\text{not } 6) = ?",
        option_a="1/6",
        option_b="1/3",
        option_c="2/3",
        option_d="5/6",
        correct_answer="D",
        topic="probability",
        difficulty_level=1,
        explanation="P(not 6) = 1 - P(6) = 1 - 1/6 = 5/6.",
    ),
    dict(
        question_text="If a bag has 3 red and 2 blue marbles, what is P(red)?",
        question_latex="P(\\text{red}) = ?",
        option_a="2/5",
        option_b="3/5",
        option_c="1/2",
        option_d="3/2",
        correct_answer="B",
        topic="probability",
        difficulty_level=2,
        explanation="Total marbles = 5. P(red) = 3/5.",
    ),
    dict(
        question_text="How many combinations of 2 items from 4 items?",
        question_latex="C(4,2) = \\frac{4!}{2!(4-2)!}",
        option_a="4",
        option_b="6",
        option_c="8",
        option_d="12",
        correct_answer="B",
        topic="probability",
        difficulty_level=3,
        explanation="C(4,2) = 4!/(2!×2!) = (4×3)/(2×1) = 6.",
    ),
    dict(
        question_text="What is the probability of getting at least one head in two coin flips?",
        question_latex="P(\\text{at least one H}) = ?",
        option_a="1/4",
        option_b="1/2",
        option_c="3/4",
        option_d="1",
        correct_answer="C",
        topic="probability",
        difficulty_level=3,
        explanation="P(at least one H) = 1 - P(no heads) = 1 - P(TT) = 1 - 1/4 = 3/4.",
    ),

    # Number Systems (10 questions)
    dict(
        question_text="Convert binary 1010 to decimal",
        question_latex="1010_2 = ?_{10}",
        option_a="8",
        option_b="10",
        option_c="12",
        option_d="14",
        correct_answer="B",
        topic="number_systems",
        difficulty_level=2,
        explanation="1010₂ = 1×2³ + 0×2² + 1×2¹ + 0×2⁰ = 8 + 0 + 2 + 0 = 10.",
    ),
    dict(
        question_text="Convert decimal 15 to binary",
        question_latex="15_{10} = ?_2",
        option_a="1101",
        option_b="1110",
        option_c="1111",
        option_d="10000",
        correct_answer="C",
        topic="number_systems",
        difficulty_level=2,
        explanation="15 = 8 + 4 + 2 + 1 = 2³ + 2² + 2¹ + 2⁰ = 1111₂.",
    ),
    dict(
        question_text="What is 101₂ + 11₂ in binary?",
        question_latex="101_2 + 11_2 = ?",
        option_a="110₂",
        option_b="111₂",
        option_c="1000₂",
        option_d="1001₂",
        correct_answer="C",
        topic="number_systems",
        difficulty_level=3,
        explanation="101₂ (5) + 11₂ (3) = 1000₂ (8).",
    ),
    dict(
        question_text="Convert hexadecimal A to decimal",
        question_latex="A_{16} = ?_{10}",
        option_a="9",
        option_b="10",
        option_c="11",
        option_d="12",
        correct_answer="B",
        topic="number_systems",
        difficulty_level=2,
        explanation="In hexadecimal, A represents 10 in decimal.",
    ),
    dict(
        question_text="What is the base of the octal number system?",
        question_latex="\\text{Octal base} = ?",
        option_a="2",
        option_b="8",
        option_c="10",
        option_d="16",
        correct_answer="B",
        topic="number_systems",
        difficulty_level=1,
        explanation="Octal number system uses base 8 (digits 0-7).",
    ),
    dict(
        question_text="Convert binary 1111 to decimal",
        question_latex="1111_2 = ?_{10}",
        option_a="12",
        option_b="13",
        option_c="14",
        option_d="15",
        correct_answer="D",
        topic="number_systems",
        difficulty_level=2,
        explanation="1111₂ = 1×2³ + 1×2² + 1×2¹ + 1×2⁰ = 8 + 4 + 2 + 1 = 15.",
    ),
    dict(
        question_text="What is hexadecimal F in decimal?",
        question_latex="F_{16} = ?_{10}",
        option_a="14",
        option_b="15",
        option_c="16",
        option_d="17",
        correct_answer="B",
        topic="number_systems",
        difficulty_level=1,
        explanation="In hexadecimal, F represents 15 in decimal.",
    ),
    dict(
        question_text="Convert decimal 8 to binary",
        question_latex="8_{10} = ?_2",
        option_a="100",
        option_b="1000",
        option_c="1100",
        option_d="10000",
        correct_answer="B",
        topic="number_systems",
        difficulty_level=1,
        explanation="8 = 2³ = 1000₂.",
    ),
    dict(
        question_text="What is 10₂ × 11₂ in binary?",
        question_latex="10_2 \\times 11_2 = ?",
        option_a="100₂",
        option_b="101₂",
        option_c="110₂",
        option_d="111₂",
        correct_answer="C",
        topic="number_systems",
        difficulty_level=3,
        explanation="10₂ (2) × 11₂ (3) = 110₂ (6).",
    ),
    dict(
        question_text="Convert octal 12 to decimal",
        question_latex="12_8 = ?_{10}",
        option_a="8",
        option_b="9",
        option_c="10",
        option_d="12",
        correct_answer="C",
        topic="number_systems",
        difficulty_level=2,
        explanation="12₈ = 1×8¹ + 2×8⁰ = 8 + 2 = 10.",
    ),
]


def load_catalog() -> list[QuestionSchema]:
    """Return every catalog entry validated against ``QuestionSchema``."""
    return [QuestionSchema(**q) for q in QUESTIONS]
