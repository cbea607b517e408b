from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from accounts.models import AdminAccount
from blogs.models import Blog
from blogs.utils import estimate_read_time
from builders.models import BuilderProject
from common.slugs import unique_slug
from content.models import Resource
from creators.models import Creator
from events.models import Event
from showcase.models import Showcase

EVENTS = [
    {
        "title": "Web3 Summit 2025",
        "date": "March 15-17, 2025",
        "location": "San Francisco, CA",
        "attendees": 5000,
        "description": "The premier conference for Web3 developers and entrepreneurs. "
                       "Join us for three days of talks, workshops, and networking.",
        "type": Event.TYPE_CONFERENCE,
        "price": "$299",
        "banner_image": "https://images.unsplash.com/photo-1540575467063-178a50c2df87?w=800",
        "registration_url": "https://web3summit.example.com",
    },
    {
        "title": "DeFi Workshop",
        "date": "February 20, 2025",
        "location": "Online",
        "attendees": 500,
        "description": "Learn how to build decentralized finance applications from scratch.",
        "type": Event.TYPE_WORKSHOP,
        "price": "Free",
        "banner_image": "https://images.unsplash.com/photo-1591115765373-5207764f72e7?w=800",
    },
]

CREATORS = [
    {
        "name": "Alex Chen",
        "bio": "Web3 educator and DeFi researcher sharing weekly deep dives.",
        "profile_image": "https://images.unsplash.com/photo-1472099645785-5658abf4ff4e?w=400",
        "social_media": [{"platform": "twitter", "url": "https://twitter.com/alexchen"}],
        "coin_symbol": "ALEX",
        "coin_market_cap": 2500000,
        "coin_price": 2.5,
        "coin_change_24h": 5.2,
        "followers": "125K",
    },
    {
        "name": "Maria Santos",
        "bio": "NFT artist exploring generative art on-chain.",
        "profile_image": "https://images.unsplash.com/photo-1494790108377-be9c29b29330?w=400",
        "social_media": [{"platform": "instagram", "url": "https://instagram.com/mariasantos"}],
        "coin_symbol": "MARIA",
        "coin_market_cap": 1800000,
        "coin_price": 1.8,
        "coin_change_24h": -2.1,
        "followers": "89K",
    },
]

BUILDER_PROJECTS = [
    {
        "title": "DeFi Lending Protocol",
        "creator": "Alex Chen",
        "description": "Decentralized lending and borrowing with dynamic interest rates.",
        "tech": ["Solidity", "React", "Hardhat"],
        "status": BuilderProject.STATUS_LIVE,
        "users": "15K+",
        "tvl": "$2.5M",
        "image": "https://images.unsplash.com/photo-1639762681485-074b7f938ba0?w=800",
        "github_url": "https://github.com/example/defi-lending",
    },
    {
        "title": "NFT Marketplace",
        "creator": "Maria Santos",
        "description": "Gas-efficient marketplace for generative art collections.",
        "tech": ["Solidity", "Next.js", "IPFS"],
        "status": BuilderProject.STATUS_BETA,
        "users": "5K+",
        "tvl": "$800K",
        "image": "https://images.unsplash.com/photo-1620321023374-d1a68fbc720d?w=800",
        "github_url": "https://github.com/example/nft-marketplace",
    },
]

RESOURCES = [
    {
        "title": "Solidity Fundamentals",
        "description": "A beginner-friendly introduction to writing smart contracts in Solidity.",
        "type": Resource.TYPE_TUTORIAL,
        "category": "Smart Contracts",
        "level": Resource.LEVEL_BEGINNER,
        "duration": "4 hours",
        "author": "Alex Chen",
        "rating": 4.8,
        "students": 12500,
        "image": "https://images.unsplash.com/photo-1639322537228-f710d846310a?w=800",
        "resource_url": "https://docs.soliditylang.org",
        "provider": "Web3 Economy Academy",
        "tags": ["solidity", "ethereum", "smart-contracts"],
        "featured": True,
    },
    {
        "title": "Ethereum Developer Docs",
        "description": "The official documentation for building on Ethereum.",
        "type": Resource.TYPE_DOCUMENTATION,
        "category": "Ethereum",
        "level": Resource.LEVEL_ALL,
        "duration": "Self-paced",
        "author": "Ethereum Foundation",
        "rating": 4.9,
        "students": 50000,
        "image": "https://images.unsplash.com/photo-1622630998477-20aa696ecb05?w=800",
        "resource_url": "https://ethereum.org/developers",
        "provider": "ethereum.org",
        "tags": ["ethereum", "documentation"],
    },
]

BLOGS = [
    {
        "title": "The State of DeFi in 2025",
        "excerpt": "Where decentralized finance stands and where it is heading.",
        "content": "Decentralized finance has matured. " * 120,
        "author_name": "Alex Chen",
        "author_role": "DeFi Researcher",
        "category": Blog.CATEGORY_ANALYSIS,
        "image": "https://images.unsplash.com/photo-1639762681057-408e52192e55?w=800",
        "tags": ["defi", "analysis"],
        "featured": True,
        "published": True,
        "color": Blog.COLOR_MINT,
    },
    {
        "title": "Getting Started with DAOs",
        "excerpt": "A practical guide to joining and running a DAO.",
        "content": "Decentralized autonomous organisations coordinate people on-chain. " * 80,
        "author_name": "Maria Santos",
        "author_role": "Community Lead",
        "category": Blog.CATEGORY_GUIDE,
        "image": "https://images.unsplash.com/photo-1644088379091-d574269d422f?w=800",
        "tags": ["dao", "governance"],
        "published": True,
        "color": Blog.COLOR_GOLD,
    },
]

SHOWCASE = [
    {
        "title": "YieldVault",
        "description": "Auto-compounding yield vaults across major lending markets.",
        "category": "DeFi",
        "creator": "Alex Chen",
        "image": "https://images.unsplash.com/photo-1642104704074-907c0698cbd9?w=800",
        "tags": ["defi", "yield"],
        "stars": 1250,
        "users": "8K+",
        "tvl_usd": Decimal("4200000"),
        "github_url": "https://github.com/example/yieldvault",
        "featured": True,
        "trending": True,
        "published": True,
    },
    {
        "title": "ArtBlocks Explorer",
        "description": "Browse and compare generative art collections.",
        "category": "NFT",
        "creator": "Maria Santos",
        "image": "https://images.unsplash.com/photo-1643101808200-0d159c1331f9?w=800",
        "tags": ["nft", "art"],
        "stars": 430,
        "users": "2K+",
        "tvl_usd": Decimal("0"),
        "color": Showcase.COLOR_GOLD,
        "published": True,
    },
]


class Command(BaseCommand):
    help = "Seed the database with a superadmin account and sample content"

    def add_arguments(self, parser):
        parser.add_argument("--email", default="admin@web3economy.com", help="Superadmin email")
        parser.add_argument("--password", default="Admin123!", help="Superadmin password")
        parser.add_argument(
            "--keep-existing",
            action="store_true",
            help="Add the samples without clearing existing rows first",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if not options["keep_existing"]:
            self.stdout.write("Clearing existing data...")
            for model in (AdminAccount, Event, Creator, BuilderProject, Resource, Blog, Showcase):
                model.objects.all().delete()

        email = options["email"].lower()
        if AdminAccount.objects.filter(email__iexact=email).exists():
            self.stdout.write(self.style.WARNING(f"Admin {email} already exists, skipping"))
        else:
            AdminAccount.objects.create_superuser(email=email, password=options["password"], name="Admin User")
            self.stdout.write(f"Created superadmin {email}")

        Event.objects.bulk_create(Event(**row) for row in EVENTS)
        Creator.objects.bulk_create(Creator(**row) for row in CREATORS)
        BuilderProject.objects.bulk_create(BuilderProject(**row) for row in BUILDER_PROJECTS)

        # slugs are assigned one by one so the suffix rule sees earlier rows
        for row in RESOURCES:
            Resource.objects.create(slug=unique_slug(Resource, row["title"]), **row)
        for row in BLOGS:
            Blog.objects.create(
                slug=unique_slug(Blog, row["title"]),
                read_time=estimate_read_time(row["content"]),
                published_date=timezone.now(),
                **row,
            )
        for row in SHOWCASE:
            Showcase.objects.create(slug=unique_slug(Showcase, row["title"]), **row)

        self.stdout.write(self.style.SUCCESS(
            f"Seeded {len(EVENTS)} events, {len(CREATORS)} creators, {len(BUILDER_PROJECTS)} builder projects, "
            f"{len(RESOURCES)} resources, {len(BLOGS)} blog posts and {len(SHOWCASE)} showcase projects"
        ))
