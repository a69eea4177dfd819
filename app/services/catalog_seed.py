"""
Sample reference data inserted into empty catalogues.

Keys match the ORM column names so rows can be passed straight to
``Store.seed_if_empty``.
"""
from __future__ import annotations

from typing import Any, Dict, List

SAMPLE_MARKETPLACES: List[Dict[str, Any]] = [
    {
        "name": "Flipkart",
        "description": "India's leading e-commerce marketplace with millions of active customers",
        "logo": "https://logo.clearbit.com/flipkart.com",
        "website": "https://seller.flipkart.com",
        "industries": ["Retail", "Electronics", "Fashion", "Home & Living"],
        "product_types": ["Physical Products", "Electronics", "Clothing", "Accessories"],
        "target_market": ["B2C", "Pan India"],
        "commission_rate": 15,
        "average_rating": 4.2,
        "review_count": 15000,
        "features": [
            {"title": "Smart Logistics", "description": "End-to-end logistics support with Ekart integration"},
            {"title": "Payment Protection", "description": "Secure payment gateway with quick settlement cycles"},
        ],
        "requirements": [
            {"title": "Business Registration", "description": "Valid GST registration and business PAN required"},
            {"title": "Quality Standards", "description": "Products must meet Flipkart's quality guidelines"},
        ],
        "onboarding_steps": [
            {"order": 1, "title": "Registration", "description": "Complete the seller registration form"},
            {"order": 2, "title": "Documentation", "description": "Submit business and tax documents"},
        ],
        "supported_regions": ["All India"],
        "payment_methods": ["Bank Transfer", "UPI"],
        "shipping_options": ["Flipkart Assured", "Standard Delivery"],
        "minimum_order_value": 0,
        "status": "active",
    },
    {
        "name": "Amazon India",
        "description": "Global e-commerce platform with extensive reach and advanced seller tools",
        "logo": "https://logo.clearbit.com/amazon.in",
        "website": "https://sell.amazon.in",
        "industries": ["Retail", "Electronics", "Books", "Fashion"],
        "product_types": ["Physical Products", "Digital Products", "Books"],
        "target_market": ["B2C", "Pan India"],
        "commission_rate": 18,
        "average_rating": 4.5,
        "review_count": 20000,
        "features": [
            {"title": "FBA", "description": "Fulfillment by Amazon for hassle-free delivery"},
            {"title": "Prime Badge", "description": "Eligibility for Amazon Prime and faster delivery"},
        ],
        "requirements": [
            {"title": "Business Verification", "description": "Valid GST and business documentation required"},
            {"title": "Quality Check", "description": "Products must pass Amazon's quality standards"},
        ],
        "onboarding_steps": [
            {"order": 1, "title": "Account Creation", "description": "Set up your Amazon seller account"},
            {"order": 2, "title": "Verification", "description": "Complete business verification process"},
        ],
        "supported_regions": ["All India"],
        "payment_methods": ["Bank Transfer"],
        "shipping_options": ["FBA", "Easy Ship", "Self Ship"],
        "minimum_order_value": 0,
        "status": "active",
    },
    {
        "name": "Meesho",
        "description": "Social commerce platform ideal for small businesses and resellers",
        "logo": "https://logo.clearbit.com/meesho.com",
        "website": "https://supplier.meesho.com",
        "industries": ["Fashion", "Accessories", "Home & Living"],
        "product_types": ["Fashion", "Accessories", "Home Decor"],
        "target_market": ["B2C", "Resellers", "Pan India"],
        "commission_rate": 10,
        "average_rating": 4.0,
        "review_count": 8000,
        "features": [
            {"title": "Zero Investment", "description": "Start selling without any registration fee"},
            {"title": "Reseller Network", "description": "Access to millions of resellers across India"},
        ],
        "requirements": [
            {"title": "Basic Documentation", "description": "GST registration (if applicable) and bank account"},
            {"title": "Product Photos", "description": "High-quality product images required"},
        ],
        "onboarding_steps": [
            {"order": 1, "title": "Registration", "description": "Sign up as a Meesho supplier"},
            {"order": 2, "title": "Catalog Creation", "description": "Upload your product catalog"},
        ],
        "supported_regions": ["All India"],
        "payment_methods": ["Bank Transfer", "UPI"],
        "shipping_options": ["Meesho Logistics"],
        "minimum_order_value": 0,
        "status": "active",
    },
]

SAMPLE_COMPLIANCE_ITEMS: List[Dict[str, Any]] = [
    {
        "title": "GST Registration",
        "description": "Register for Goods and Services Tax if your annual turnover exceeds ₹20 lakhs",
        "category": "Taxation",
        "priority": "high",
        "applicable_business_types": ["All"],
        "applicable_states": ["All"],
        "due_date": "2024-03-31",
        "link": "https://www.gst.gov.in/",
        "status": "active",
        "steps": [
            {
                "order": 1,
                "description": "Gather required documents (PAN, Aadhaar, business registration)",
                "estimatedTime": "1-2 days",
            },
            {"order": 2, "description": "Fill Form GST REG-01 online", "estimatedTime": "1 day"},
        ],
        "fees": {"amount": 0, "description": "No fees for registration"},
        "helpful_links": [{"title": "GST Portal", "url": "https://www.gst.gov.in/"}],
    },
    {
        "title": "MSME Registration",
        "description": "Register your business under MSME to avail government benefits",
        "category": "Registration",
        "priority": "medium",
        "applicable_business_types": ["All"],
        "applicable_states": ["All"],
        "link": "https://udyamregistration.gov.in/",
        "status": "active",
        "steps": [
            {"order": 1, "description": "Visit Udyam Registration Portal", "estimatedTime": "30 mins"},
            {"order": 2, "description": "Fill the online form with Aadhaar", "estimatedTime": "1 hour"},
        ],
        "fees": {"amount": 0, "description": "Free registration"},
        "helpful_links": [
            {"title": "Udyam Registration Portal", "url": "https://udyamregistration.gov.in/"}
        ],
    },
    {
        "title": "PF Registration",
        "description": "Register for Provident Fund if you have 20 or more employees",
        "category": "Labor Compliance",
        "priority": "high",
        "applicable_business_types": ["All"],
        "applicable_states": ["All"],
        "link": "https://unifiedportal-emp.epfindia.gov.in/",
        "status": "active",
        "steps": [
            {"order": 1, "description": "Apply for PF registration on EPFO portal", "estimatedTime": "1-2 days"},
        ],
        "fees": {"amount": 0, "description": "No registration fees"},
        "helpful_links": [
            {"title": "EPFO Portal", "url": "https://unifiedportal-emp.epfindia.gov.in/"}
        ],
    },
]

SAMPLE_COURSES: List[Dict[str, Any]] = [
    {
        "title": "Financial Management for Small Businesses",
        "description": (
            "Learn the fundamentals of financial management tailored for small businesses in India. "
            "This course covers bookkeeping, cash flow management, and tax planning strategies."
        ),
        "category": "Finance",
        "level": "Beginner",
        "thumbnail": "https://images.unsplash.com/photo-1454165804606-c3d57bc86b40?q=80&w=2070&auto=format&fit=crop",
        "duration": 240,
        "instructor": {
            "name": "Diya Agrawal",
            "bio": "Chartered Accountant with 12 years of experience helping small businesses manage their finances effectively.",
            "avatar": "https://images.unsplash.com/photo-1573496359142-b8d87734a5a2?q=80&w=1988&auto=format&fit=crop",
        },
        "tags": ["financial planning", "accounting", "tax", "budget", "cash flow"],
        "prerequisites": ["Basic understanding of business operations"],
        "learning_outcomes": [
            "Create and manage a budget for your business",
            "Understand basic accounting principles",
            "Implement effective cash flow management",
            "Prepare for tax obligations",
        ],
        "status": "published",
        "language": "en",
        "rating_average": 4.7,
        "rating_count": 128,
        "enrollment_count": 320,
        "completion_rate": 76,
        "certificate_available": True,
    },
    {
        "title": "Digital Marketing for Women Entrepreneurs",
        "description": (
            "Master digital marketing strategies to grow your business online. Learn social media "
            "marketing, content creation, SEO, and email marketing tactics specifically designed for "
            "Indian markets."
        ),
        "category": "Marketing",
        "level": "Intermediate",
        "thumbnail": "https://www.webindiamaster.com/public/uploads/women-enterpreneurship.jpg",
        "duration": 300,
        "instructor": {
            "name": "Ashish Kumar",
            "bio": "Digital marketing consultant who has helped over 100 women-led businesses establish their online presence.",
            "avatar": "https://images.unsplash.com/photo-1494790108377-be9c29b29330?q=80&w=1974&auto=format&fit=crop",
        },
        "tags": ["social media", "SEO", "content marketing", "email campaigns", "online branding"],
        "prerequisites": ["Basic computer skills", "Active social media accounts"],
        "learning_outcomes": [
            "Create a comprehensive digital marketing strategy",
            "Build and manage social media presence",
            "Develop effective content marketing campaigns",
            "Understand SEO basics for better online visibility",
        ],
        "status": "published",
        "language": "en",
        "rating_average": 4.9,
        "rating_count": 215,
        "enrollment_count": 450,
        "completion_rate": 82,
        "certificate_available": True,
    },
    {
        "title": "Supply Chain Management for Retail Businesses",
        "description": (
            "Optimize your retail business operations with effective supply chain strategies. This "
            "course covers inventory management, supplier relationships, logistics, and distribution "
            "channels."
        ),
        "category": "Operations",
        "level": "Advanced",
        "thumbnail": "https://images.unsplash.com/photo-1566576912321-d58ddd7a6088?q=80&w=2070&auto=format&fit=crop",
        "duration": 280,
        "instructor": {
            "name": "Vikram Mehta",
            "bio": "Operations expert with experience in leading retail chains across India.",
            "avatar": "https://images.unsplash.com/photo-1566492031773-4f4e44671857?q=80&w=1974&auto=format&fit=crop",
        },
        "tags": ["inventory management", "logistics", "supplier management", "retail operations"],
        "prerequisites": ["Basic understanding of retail business", "Familiarity with inventory concepts"],
        "learning_outcomes": [
            "Develop efficient inventory management systems",
            "Optimize logistics and distribution channels",
            "Build strong supplier relationships",
            "Implement cost-effective supply chain strategies",
        ],
        "status": "published",
        "language": "en",
        "rating_average": 4.5,
        "rating_count": 98,
        "enrollment_count": 220,
        "completion_rate": 68,
        "certificate_available": True,
    },
    {
        "title": "Technology Tools for Business Efficiency",
        "description": (
            "Discover and implement technology solutions to streamline your business operations. Learn "
            "about project management tools, automation, cloud services, and communication platforms."
        ),
        "category": "Technology",
        "level": "Beginner",
        "thumbnail": "https://images.unsplash.com/photo-1581090464777-f3220bbe1b8b?q=80&w=1974&auto=format&fit=crop",
        "duration": 210,
        "instructor": {
            "name": "Raj Kapoor",
            "bio": "Tech consultant specializing in helping small businesses adopt digital solutions.",
            "avatar": "https://images.unsplash.com/photo-1531891437562-4301cf35b7e4?q=80&w=1964&auto=format&fit=crop",
        },
        "tags": ["automation", "project management", "cloud services", "productivity tools"],
        "prerequisites": ["Basic computer skills"],
        "learning_outcomes": [
            "Select appropriate technology tools for your business needs",
            "Implement automated workflows",
            "Utilize cloud services for business operations",
            "Improve team communication with digital tools",
        ],
        "status": "published",
        "language": "en",
        "rating_average": 4.6,
        "rating_count": 175,
        "enrollment_count": 380,
        "completion_rate": 85,
        "certificate_available": True,
    },
    {
        "title": "Leadership Skills for Women Entrepreneurs",
        "description": (
            "Develop essential leadership skills to grow your business and inspire your team. This "
            "course covers effective communication, decision-making, team building, and conflict "
            "resolution."
        ),
        "category": "Soft Skills",
        "level": "Intermediate",
        "thumbnail": "https://images.unsplash.com/photo-1551836022-d5d88e9218df?q=80&w=2070&auto=format&fit=crop",
        "duration": 250,
        "instructor": {
            "name": "Meera Desai",
            "bio": "Leadership coach with expertise in women entrepreneurship development.",
            "avatar": "https://images.unsplash.com/photo-1573497019940-1c28c88b4f3e?q=80&w=1974&auto=format&fit=crop",
        },
        "tags": ["leadership", "communication", "team management", "conflict resolution"],
        "prerequisites": ["Experience managing a team or business"],
        "learning_outcomes": [
            "Develop effective leadership communication",
            "Build and manage high-performing teams",
            "Make strategic business decisions",
            "Handle workplace conflicts professionally",
        ],
        "status": "published",
        "language": "en",
        "rating_average": 4.8,
        "rating_count": 165,
        "enrollment_count": 340,
        "completion_rate": 79,
        "certificate_available": True,
    },
    {
        "title": "Business Law Essentials for Entrepreneurs",
        "description": (
            "Understand the legal aspects of running a business in India. This course covers business "
            "registration, contracts, intellectual property, employment law, and compliance requirements."
        ),
        "category": "Legal",
        "level": "Beginner",
        "thumbnail": "https://images.unsplash.com/photo-1589829085413-56de8ae18c73?q=80&w=2012&auto=format&fit=crop",
        "duration": 270,
        "instructor": {
            "name": "Anand Krishnan",
            "bio": "Corporate lawyer specializing in small business law and compliance.",
            "avatar": "https://images.unsplash.com/photo-1584999734482-0361aecad844?q=80&w=1980&auto=format&fit=crop",
        },
        "tags": ["business law", "contracts", "intellectual property", "compliance"],
        "prerequisites": ["None"],
        "learning_outcomes": [
            "Understand different business structures and registration processes",
            "Create legally sound business contracts",
            "Protect your intellectual property",
            "Comply with relevant business regulations",
        ],
        "status": "published",
        "language": "en",
        "rating_average": 4.4,
        "rating_count": 110,
        "enrollment_count": 290,
        "completion_rate": 72,
        "certificate_available": True,
    },
]

SAMPLE_MENTORS: List[Dict[str, Any]] = [
    {
        "name": "Diya Agrawal",
        "title": "Financial Consultant & Business Advisor",
        "bio": (
            "With over 15 years of experience in the financial sector, I specialize in helping women "
            "entrepreneurs optimize their business finances and secure funding. My background includes "
            "working with major banks and venture capital firms."
        ),
        "avatar": None,
        "expertise": ["Finance", "Leadership"],
        "industries": ["Retail", "Technology", "Services"],
        "languages": ["English", "Hindi", "Punjabi"],
        "experience": {"years": 15, "currentRole": "Financial Consultant", "company": "Malhotra Consulting Group"},
        "mentee_capacity": {"current": 3, "maximum": 5},
        "rating_average": 4.9,
        "rating_count": 78,
        "sessions_done": 134,
        "status": "active",
    },
    {
        "name": "Ashish Kumar",
        "title": "Digital Marketing Strategist",
        "bio": (
            "I help small businesses and startups build their digital presence from the ground up. "
            "My focus is on cost-effective strategies that deliver real results for entrepreneurs "
            "with limited budgets."
        ),
        "avatar": None,
        "expertise": ["Marketing", "Technology"],
        "industries": ["E-commerce", "Food & Beverage", "Healthcare"],
        "languages": ["English", "Hindi", "Marathi"],
        "experience": {"years": 10, "currentRole": "Founder", "company": "DigitalBoost Marketing"},
        "mentee_capacity": {"current": 4, "maximum": 6},
        "rating_average": 4.7,
        "rating_count": 56,
        "sessions_done": 98,
        "status": "active",
    },
    {
        "name": "Anita Desai",
        "title": "Operations & Supply Chain Expert",
        "bio": (
            "Former Operations Director for a major Indian retail chain, I now consult with small and "
            "medium businesses to streamline their operations and reduce costs while improving "
            "customer satisfaction."
        ),
        "avatar": "https://images.unsplash.com/photo-1567532939604-b6b5b0db2604?q=80&w=1974&auto=format&fit=crop",
        "expertise": ["Operations", "Leadership"],
        "industries": ["Manufacturing", "Retail", "Logistics"],
        "languages": ["English", "Hindi", "Gujarati"],
        "experience": {"years": 18, "currentRole": "Operations Consultant", "company": "Efficient Enterprise Solutions"},
        "mentee_capacity": {"current": 2, "maximum": 4},
        "rating_average": 4.8,
        "rating_count": 42,
        "sessions_done": 75,
        "status": "active",
    },
    {
        "name": "Vikram Joshi",
        "title": "Technology & Product Development Specialist",
        "bio": (
            "As a startup founder and former CTO, I help non-technical entrepreneurs navigate the world "
            "of technology, from choosing the right platforms to hiring tech talent."
        ),
        "avatar": "https://images.unsplash.com/photo-1556157382-97eda2d62296?q=80&w=2070&auto=format&fit=crop",
        "expertise": ["Technology", "Operations"],
        "industries": ["SaaS", "Mobile Apps", "E-commerce"],
        "languages": ["English", "Hindi"],
        "experience": {"years": 12, "currentRole": "Founder & CTO", "company": "TechFoundry"},
        "mentee_capacity": {"current": 5, "maximum": 5},
        "rating_average": 4.9,
        "rating_count": 89,
        "sessions_done": 127,
        "status": "active",
    },
    {
        "name": "Lata Venkatesh",
        "title": "Leadership Coach & HR Specialist",
        "bio": (
            "I combine my background in human resources with leadership coaching to help entrepreneurs "
            "build effective teams, covering talent acquisition, team development and conflict resolution."
        ),
        "avatar": "https://images.unsplash.com/photo-1580489944761-15a19d654956?q=80&w=1961&auto=format&fit=crop",
        "expertise": ["Leadership", "Industry Specific"],
        "industries": ["IT", "Professional Services", "Education"],
        "languages": ["English", "Tamil", "Hindi"],
        "experience": {"years": 14, "currentRole": "Leadership Coach", "company": "Evolve Leadership Institute"},
        "mentee_capacity": {"current": 3, "maximum": 7},
        "rating_average": 4.7,
        "rating_count": 63,
        "sessions_done": 110,
        "status": "active",
    },
    {
        "name": "Arjun Reddy",
        "title": "Legal Advisor for Startups",
        "bio": (
            "As a business lawyer with a focus on entrepreneurship, I help startups with company "
            "registration, compliance, contracts and intellectual property protection."
        ),
        "avatar": "https://images.unsplash.com/photo-1564564321837-a57b7070ac4f?q=80&w=2076&auto=format&fit=crop",
        "expertise": ["Legal", "Industry Specific"],
        "industries": ["Technology", "E-commerce", "Creative Industries"],
        "languages": ["English", "Hindi", "Telugu"],
        "experience": {"years": 11, "currentRole": "Founder", "company": "StartupLegal Advisors"},
        "mentee_capacity": {"current": 2, "maximum": 4},
        "rating_average": 4.6,
        "rating_count": 37,
        "sessions_done": 68,
        "status": "active",
    },
]

LEGAL_GUIDES: List[Dict[str, str]] = [
    {
        "id": "reg-1",
        "title": "Business Registration Guide",
        "description": "Step-by-step guide for registering your business in India",
        "content": """# Business Registration Process

## 1. Choose Your Business Structure
- Sole Proprietorship
- Partnership
- Limited Liability Partnership (LLP)
- Private Limited Company
- One Person Company (OPC)

## 2. Required Documents
1. Identity Proof (Aadhaar/PAN)
2. Address Proof
3. Business Address Proof
4. Photographs
5. Bank Account Details

## 3. Registration Steps
1. Select business structure
2. Apply for PAN/TAN
3. Register with MCA (for companies)
4. Apply for GST (if applicable)
5. Obtain local licenses

## 4. Estimated Costs
- Company Registration: ₹3,000 - ₹15,000
- GST Registration: Free
- Professional Fees: Varies

## 5. Timeline
- Sole Proprietorship: 1-3 days
- Partnership: 3-7 days
- LLP/Company: 15-30 days""",
        "last_updated": "2024-02-20",
        "category": "registration",
    },
    {
        "id": "reg-2",
        "title": "GST Registration",
        "description": "Complete guide to GST registration and compliance",
        "content": """# GST Registration Guide

## 1. Eligibility Check
- Turnover exceeds ₹20 lakhs (₹40 lakhs for goods)
- Interstate supplies
- E-commerce operators

## 2. Required Documents
1. PAN of Business/Promoters
2. Aadhaar of Promoters
3. Business Registration Proof
4. Bank Account Statement
5. Property Documents

## 3. Registration Process
1. Visit GST Portal
2. Fill Form GST REG-01
3. Upload Documents
4. Verify through OTP
5. Receive GSTIN

## 4. Post Registration
- File Returns Monthly/Quarterly
- Maintain Digital Records
- Issue GST Invoices

## 5. Important Deadlines
- GSTR-1: 10th of next month
- GSTR-3B: 20th of next month""",
        "last_updated": "2024-02-18",
        "category": "registration",
    },
    {
        "id": "tax-1",
        "title": "Income Tax Filing for Businesses",
        "description": "Guide to filing income tax returns for your business",
        "content": """# Business Income Tax Filing

## 1. Record Keeping
- Maintain Books of Accounts
- Keep All Invoices/Bills
- Track Expenses & Income
- Document Asset Purchases

## 2. Important Forms
1. ITR-3: For Proprietorship
2. ITR-5: For Partnership/LLP
3. ITR-6: For Companies

## 3. Key Dates
- Financial Year: April 1 - March 31
- Due Date: July 31 (non-audit)
- Due Date: October 31 (audit cases)

## 4. Deductions Available
- Section 80C investments
- Business Expenses
- Depreciation
- Employee Benefits

## 5. Common Mistakes to Avoid
1. Missing Deadlines
2. Incorrect Form Selection
3. Incomplete Documentation""",
        "last_updated": "2024-02-15",
        "category": "taxation",
    },
    {
        "id": "tax-2",
        "title": "GST Filing Guide",
        "description": "Monthly and annual GST filing procedures",
        "content": """# GST Filing Process

## 1. Monthly Requirements
- Track All Sales/Purchases
- Maintain Digital Records
- Reconcile with Bank Statements
- Calculate Tax Liability

## 2. Return Types
1. GSTR-1: Outward Supplies
2. GSTR-3B: Summary Return
3. GSTR-9: Annual Return

## 3. Filing Process
1. Prepare Invoice Data
2. Upload to GST Portal
3. Pay Tax Liability
4. File Returns

## 4. Common Errors
- Mismatch in GSTR-1 & 3B
- Wrong Tax Calculation
- Late Filing
- Input Credit Issues

## 5. Penalties
- Late Filing: ₹50-100/day
- Tax Short Payment: 18% p.a.""",
        "last_updated": "2024-02-10",
        "category": "taxation",
    },
]
