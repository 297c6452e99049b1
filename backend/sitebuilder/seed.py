"""
Demo data for local development: `flask --app sitebuilder seed`.

Creates an admin and a regular user, the built-in section categories with
one template each (some with variants), and a sample website.
"""
from datetime import datetime, timezone

import click
from flask import current_app

from sitebuilder.extensions import db
from sitebuilder.models.section import SectionTemplate
from sitebuilder.models.section_category import SectionCategory
from sitebuilder.models.section_variant import SectionVariant
from sitebuilder.models.user import User, ROLE_ADMIN, ROLE_USER
from sitebuilder.models.website import Website
from sitebuilder.utils.transaction import transactional

DEMO_USERS = [
    {"name": "Admin User", "email": "admin@example.com", "password": "admin123", "role": ROLE_ADMIN},
    {"name": "Regular User", "email": "user@example.com", "password": "user123", "role": ROLE_USER},
]

MENU_ITEMS = [
    {"label": "Home", "url": "#home"},
    {"label": "About", "url": "#about"},
    {"label": "Services", "url": "#services"},
    {"label": "Contact", "url": "#contact"},
]

CATEGORIES = [
    {"slug": "header", "name": "Header", "description": "Top navigation and branding sections"},
    {"slug": "hero", "name": "Hero", "description": "Eye-catching introductory sections"},
    {"slug": "about", "name": "About", "description": "Company or personal information sections"},
    {"slug": "services", "name": "Services", "description": "Service offering sections"},
    {"slug": "pricing", "name": "Pricing", "description": "Pricing tables and plans"},
    {"slug": "footer", "name": "Footer", "description": "Bottom page sections with links and info"},
]


def default_section(category_slug):
    """Template name, default_data and variants for a built-in category."""
    if category_slug == "header":
        data = {
            "logo": "/uploads/default-logo.png",
            "title": "Company Name",
            "menuItems": MENU_ITEMS,
            "ctaButton": {"label": "Get Started", "url": "#contact"},
        }
        return "Standard Header", data, [("Transparent Header", {**data, "transparent": True})]

    if category_slug == "hero":
        return "Main Hero", {
            "headline": "Welcome to Our Website",
            "subheadline": "We provide the best services for your needs",
            "backgroundImage": "/uploads/default-hero.jpg",
            "ctaButton": {"label": "Learn More", "url": "#about"},
            "secondaryButton": {"label": "Contact Us", "url": "#contact"},
        }, [("Video Hero", {
            "headline": "Welcome to Our Website",
            "subheadline": "We provide the best services for your needs",
            "backgroundVideo": "/uploads/default-video.mp4",
            "ctaButton": {"label": "Learn More", "url": "#about"},
        })]

    if category_slug == "about":
        return "About Us", {
            "title": "About Our Company",
            "description": "We are a team of professionals dedicated to providing the best services for our clients.",
            "image": "/uploads/default-about.jpg",
            "features": [
                {"title": "Expert Team", "description": "Our team consists of industry experts"},
                {"title": "Quality Service", "description": "We provide top-notch services"},
                {"title": "Customer Support", "description": "24/7 customer support"},
            ],
        }, []

    if category_slug == "services":
        return "Services Grid", {
            "title": "Our Services",
            "description": "We offer a wide range of services to meet your needs",
            "services": [
                {"title": "Web Design", "description": "Custom website design", "icon": "design"},
                {"title": "Development", "description": "Web and mobile development", "icon": "code"},
                {"title": "Marketing", "description": "Digital marketing services", "icon": "marketing"},
            ],
        }, []

    if category_slug == "pricing":
        cta = {"label": "Get Started", "url": "#contact"}
        return "Pricing Table", {
            "title": "Our Pricing Plans",
            "description": "Choose the plan that fits your needs",
            "plans": [
                {"title": "Basic", "price": "$9.99", "period": "monthly",
                 "features": ["Feature 1", "Feature 2", "Feature 3"], "ctaButton": cta},
                {"title": "Pro", "price": "$19.99", "period": "monthly",
                 "features": [f"Feature {i}" for i in range(1, 6)], "ctaButton": cta, "highlighted": True},
                {"title": "Enterprise", "price": "$29.99", "period": "monthly",
                 "features": [f"Feature {i}" for i in range(1, 8)],
                 "ctaButton": {"label": "Contact Us", "url": "#contact"}},
            ],
        }, []

    if category_slug == "footer":
        year = datetime.now(timezone.utc).year
        return "Standard Footer", {
            "logo": "/uploads/default-logo.png",
            "companyName": "Company Name",
            "description": "A brief description of your company",
            "menuItems": MENU_ITEMS,
            "socialLinks": [
                {"platform": "Facebook", "url": "https://facebook.com"},
                {"platform": "Twitter", "url": "https://twitter.com"},
                {"platform": "Instagram", "url": "https://instagram.com"},
            ],
            "copyright": f"© {year} Company Name. All rights reserved.",
        }, []

    return "Default Section", {"title": "Section Title", "content": "Section Content"}, []


def seed_database():
    """Insert demo rows. Returns the created admin, user and website."""
    users = {}
    with transactional():
        for spec in DEMO_USERS:
            user = User()
            user.name = spec["name"]
            user.email = spec["email"]
            user.role = spec["role"]
            user.set_password(spec["password"])
            db.session.add(user)
            users[spec["role"]] = user
        db.session.flush()

        for spec in CATEGORIES:
            category = SectionCategory()
            category.slug = spec["slug"]
            category.name = spec["name"]
            category.description = spec["description"]
            db.session.add(category)
            db.session.flush()

            name, default_data, variants = default_section(category.slug)
            section = SectionTemplate()
            section.category_id = category.id
            section.name = name
            section.version = 1
            section.default_data = default_data
            section.created_by = users[ROLE_ADMIN].id
            db.session.add(section)
            db.session.flush()

            for label, variant_data in variants:
                variant = SectionVariant()
                variant.section_id = section.id
                variant.label = label
                variant.variant_data = variant_data
                db.session.add(variant)

        website = Website()
        website.owner_id = users[ROLE_USER].id
        website.name = "My First Website"
        website.slug = "my-first-website"
        db.session.add(website)

    current_app.logger.info("Seed completed: %d categories", len(CATEGORIES))
    return users[ROLE_ADMIN], users[ROLE_USER], website


def register_commands(app):
    @app.cli.command("seed")
    @click.option("--create-tables", is_flag=True, help="Create missing tables first.")
    def seed_command(create_tables):
        """Populate the database with demo data."""
        if create_tables:
            db.create_all()

        if User.query.filter_by(email=DEMO_USERS[0]["email"]).first():
            click.echo("Database already seeded.")
            return

        admin, user, website = seed_database()
        click.echo(f"Created admin {admin.email}, user {user.email}, website {website.slug}")
