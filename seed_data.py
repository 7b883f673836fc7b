"""Default exam loaded into an empty catalog at startup."""

DEFAULT_EXAM = {
    "code": "INT-2025-001",
    "title": "STRING Internship Full-Stack + Aptitude Test",
    "description": "40 Questions · 60 Minutes · Passing: 60%",
    "duration_minutes": 60,
    "passing_percentage": 60,
}

# (section, text, options, correct_index); every question is worth 1 mark
DEFAULT_QUESTIONS = [
    # C Language
    ("C Language", "What is the size of int on a typical 32-bit system?",
     ["1 byte", "2 bytes", "4 bytes", "8 bytes"], 2),
    ("C Language", "Which of the following is a valid declaration of main in C?",
     ["int main()", "void main()", "main()", "integer main()"], 0),
    ("C Language", 'What is the output of: printf("%d", 5/2);',
     ["2.5", "2", "3", "Error"], 1),
    ("C Language", "Which keyword is used to define a constant in C?",
     ["#define", "const", "static", "final"], 1),
    ("C Language", "Which of these is a valid storage class in C?",
     ["auto", "value", "managed", "private"], 0),

    # Data Structures
    ("Data Structures", "Which data structure works on FIFO principle?",
     ["Stack", "Queue", "Tree", "Graph"], 1),
    ("Data Structures", "Which traversal of a BST gives sorted order of elements?",
     ["Preorder", "Inorder", "Postorder", "Level order"], 1),
    ("Data Structures", "Time complexity of binary search on a sorted array is:",
     ["O(n)", "O(log n)", "O(n log n)", "O(1)"], 1),
    ("Data Structures", "Which data structure is most suitable for implementing recursion?",
     ["Queue", "Array", "Stack", "Linked List"], 2),
    ("Data Structures", "Which of the following is a self-balancing binary search tree?",
     ["Binary Heap", "AVL Tree", "Graph", "Trie"], 1),

    # Aptitude
    ("Aptitude", "Find the missing number: 3, 8, 15, 24, 35, __",
     ["46", "48", "49", "50"], 0),
    ("Aptitude", "A train 180m long crosses a pole in 12s. What is its approximate speed (km/h)?",
     ["35", "45", "54", "60"], 2),
    ("Aptitude", "The ratio of two numbers is 3:5. If their sum is 80, what is the larger number?",
     ["30", "50", "48", "20"], 1),
    ("Aptitude", "Simplify: 48 ÷ 2 (9 + 3)",
     ["2", "24", "288", "12"], 2),
    ("Aptitude", "If A is 25% more than B, then B is how much less than A?",
     ["15%", "20%", "25%", "30%"], 1),
    ("Aptitude", "Find the odd one out: 36, 49, 25, 22",
     ["36", "49", "25", "22"], 3),
    ("Aptitude", "2 men or 3 women can do a work in 10 days. In how many days will 6 women finish it?",
     ["5 days", "10 days", "7 days", "6 days"], 0),
    ("Aptitude", "What is 15% of 240?",
     ["24", "30", "36", "40"], 2),
    ("Aptitude", "Series: 2, 4, 12, 48, __",
     ["96", "132", "192", "240"], 2),
    ("Aptitude", "Cost Price is ₹500, Profit is 20%. Selling Price?",
     ["550", "600", "520", "700"], 1),

    # SQL
    ("SQL", "PRIMARY KEY ensures:",
     ["Duplicates", "Nulls allowed", "Unique & Not Null", "None"], 2),
    ("SQL", "Which query gives 2nd highest salary?",
     [
         "SELECT TOP 2 salary FROM Employee ORDER BY salary DESC",
         "SELECT MAX(salary) FROM Employee",
         "SELECT MAX(salary) FROM Employee WHERE salary < (SELECT MAX(salary) FROM Employee)",
         "SELECT salary FROM Employee",
     ], 2),
    ("SQL", "Index mainly improves:",
     ["Insert performance", "Delete performance", "Read/query performance", "Disk space"], 2),
    ("SQL", "JOIN is used to:",
     ["Add data", "Combine rows from multiple tables", "Delete data", "None"], 1),
    ("SQL", "Which prevents SQL Injection?",
     ["String concatenation", "Dynamic SQL", "Parameterized queries", "None"], 2),

    # HTML/CSS
    ("HTML/CSS", "Which tag is used to create a hyperlink in HTML?",
     ["<a>", "<link>", "<href>", "<url>"], 0),
    ("HTML/CSS", "Which CSS property changes the text color?",
     ["font-style", "text-color", "color", "text-style"], 2),
    ("HTML/CSS", "Which meta tag helps for responsive design?",
     [
         '<meta charset="utf-8">',
         '<meta viewport="device">',
         '<meta name="viewport" content="width=device-width, initial-scale=1">',
         "<meta responsive>",
     ], 2),
    ("HTML/CSS", "Which HTML tag is used to create an ordered list?",
     ["<ul>", "<ol>", "<li>", "<list>"], 1),

    # JavaScript
    ("JavaScript", "Which method is used to parse a JSON string?",
     ["JSON.decode()", "JSON.parse()", "JSON.toObject()", "JSON.stringify()"], 1),
    ("JavaScript", "Which keyword declares a block-scoped variable?",
     ["var", "let", "static", "global"], 1),
    ("JavaScript", "How do you write an arrow function?",
     ["function() => {}", "() => {}", "=> function() {}", "func => {}"], 1),
    ("JavaScript", "Which comparison operator checks both value and type?",
     ["==", "!=", "===", ">="], 2),
    ("JavaScript", "Which object is used for console logging?",
     ["window", "console", "document", "log"], 1),

    # React
    ("React", "Which hook is used for state in a functional component?",
     ["useEffect", "useState", "useRef", "useMemo"], 1),
    ("React", "useEffect(() => {}, []) runs:",
     ["On every render", "Only on first render", "On unmount only", "Never"], 1),
    ("React", "Keys in list rendering should be:",
     ["Random", "Index always", "Unique & stable", "Optional"], 2),
    ("React", "What is JSX?",
     [
         "A CSS preprocessor",
         "A JavaScript XML-like syntax used in React",
         "A database query language",
         "A routing library",
     ], 1),
    ("React", "Which command creates a new React app (CRA)?",
     ["npx create-react-app my-app", "npm new react-app", "react-cli new", "dotnet new react"], 0),
    ("React", "Which hook is best for side effects (API calls, subscriptions)?",
     ["useState", "useEffect", "useMemo", "useCallback"], 1),
]
