"""
Sample portfolio content loaded when ``SEED_SAMPLE_DATA`` is enabled.

These records are placeholder content so a fresh instance renders a
complete page.  Nothing depends on the exact values.
"""

PROFILE = {
    "name": "Jane Smith",
    "title": "Computer Science Student",
    "university": "State University, Class of 2026",
    "bio": (
        "I'm a computer science student interested in web development, AI and "
        "mobile applications, currently looking for internship opportunities."
    ),
    "photo_url": "https://images.example.com/profile.png",
    "linkedin": "https://linkedin.com/in/janesmith",
    "github": "https://github.com/janesmith",
    "twitter": "https://twitter.com/janesmith",
    "email": "jane.smith@example.com",
}

PROJECTS = [
    {
        "id": 1,
        "title": "Personal Portfolio Website",
        "description": "A responsive portfolio website to showcase my projects and skills.",
        "image_url": "https://images.example.com/portfolio.jpg",
        "technologies": ["HTML", "CSS", "JavaScript"],
        "project_url": "https://example.com/portfolio",
        "github_url": "https://github.com/janesmith/portfolio",
    },
    {
        "id": 2,
        "title": "Fitness Tracker App",
        "description": "A mobile application that helps users track workouts and nutrition.",
        "image_url": "https://images.example.com/fitness.jpg",
        "technologies": ["React Native", "Firebase", "Redux"],
        "project_url": "https://example.com/fitness-app",
        "github_url": "https://github.com/janesmith/fitness-app",
    },
    {
        "id": 3,
        "title": "AI Image Classifier",
        "description": "An image classification model served as a small web service.",
        "image_url": "https://images.example.com/classifier.jpg",
        "technologies": ["Python", "TensorFlow", "Flask"],
        "project_url": "https://example.com/image-classifier",
        "github_url": "https://github.com/janesmith/image-classifier",
    },
]

EDUCATIONS = [
    {
        "id": 1,
        "degree": "Bachelor of Technology in Computer Science",
        "institution": "State University College of Engineering",
        "date_range": "2022 - Present",
        "gpa": "8.0/10",
        "description": "Coursework: Web Development, Database Systems, Machine Learning, Operating Systems",
    },
    {
        "id": 2,
        "degree": "Higher Secondary Certificate",
        "institution": "City College of Secondary Education",
        "date_range": "2019 - 2021",
        "gpa": "8.3/10",
        "description": "Biology, Mathematics and Physics",
    },
]

SKILLS = [
    {"id": 1, "category": "Programming Languages", "items": ["JavaScript", "C", "C#", "Java", "C++", "SQL"]},
    {"id": 2, "category": "Web Technologies", "items": ["React", "Node.js", "HTML/CSS", "Express", "MongoDB"]},
    {"id": 3, "category": "Tools & Platforms", "items": ["Git", "Docker", "AWS", "Firebase", "GitLab"]},
    {
        "id": 4,
        "category": "Soft Skills",
        "items": ["Team Collaboration", "Problem Solving", "Time Management", "Communication"],
    },
]

EXPERIENCES = [
    {
        "id": 1,
        "position": "Software Engineering Intern",
        "company": "Tech Innovations Inc.",
        "date_range": "Summer 2023",
        "responsibilities": (
            "• Developed features for the company's web application using React and Node.js\n"
            "• Collaborated with a team of 5 developers using Agile methodologies\n"
            "• Implemented responsive UI components\n"
            "• Participated in code reviews and technical documentation"
        ),
    },
    {
        "id": 2,
        "position": "Web Developer",
        "company": "Example Services Ltd.",
        "date_range": "2024 - Present",
        "responsibilities": (
            "• Built client websites with a team of interns\n"
            "• Held weekly office hours to help students with assignments\n"
            "• Created supplementary learning materials"
        ),
    },
]

ACHIEVEMENTS = [
    {
        "id": 1,
        "title": "Dean's List Scholar",
        "organization": "State University College of Engineering • 2022 - Present",
        "description": "Maintained a GPA above 7.5 every semester while working part-time.",
        "icon": "award",
    },
    {
        "id": 2,
        "title": "Research Paper - Environmental Monitoring Rover",
        "organization": "National Conference on Emerging Trends in Engineering and Technology",
        "description": "A remotely controlled rover with gas, humidity and moisture sensors and live video streaming.",
        "icon": "Award",
    },
    {
        "id": 3,
        "title": "AWS Certified Developer",
        "organization": "Amazon Web Services • April 2025",
        "description": "AWS Certified Developer - Associate certification.",
        "icon": "certificate",
    },
]

CONTACT = {
    "email": "jane.smith@example.com",
    "phone": "+1 555 0100",
    "location": "Springfield, USA",
    "linkedin": "https://linkedin.com/in/janesmith",
    "github": "https://github.com/janesmith",
    "twitter": "https://twitter.com/janesmith",
    "instagram": "https://instagram.com/janesmith",
    "form_email": "jane.smith@example.com",
    "success_message": "Thank you for your message! I'll get back to you soon.",
}
