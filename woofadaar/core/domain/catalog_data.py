"""
Built-in gamification catalog ("Barks" points, levels, achievements, chains).

Plain data; validated by load_catalog() before use.
"""

ACTION_POINTS = {
    # Community engagement
    "questionPost": 10,
    "answerPost": 15,
    "bestAnswer": 50,
    "commentPost": 5,
    "helpfulVote": 3,
    "expertVerification": 100,
    # Profile & content
    "profileComplete": 25,
    "dogProfileAdd": 20,
    "photoUpload": 8,
    "storyShare": 12,
    "reviewWrite": 15,
    # Health & care
    "healthLogEntry": 12,
    "medicationReminder": 8,
    "vetVisitLog": 25,
    "vaccinationUpdate": 20,
    "healthMilestone": 30,
    # Community participation
    "forumParticipation": 6,
    "eventAttendance": 40,
    "workshopCompletion": 60,
    "mentorshipSession": 35,
    # Social
    "friendConnect": 15,
    "playDateOrganize": 25,
    "communityHelp": 20,
    "referralSuccess": 100,
    # Streaks & consistency
    "dailyLogin": 5,
    "weeklyStreak": 25,
    "monthlyActive": 100,
    # Special contributions
    "expertAnswer": 75,
    "moderatorAction": 30,
    "contentCreation": 45,
    "communityGuide": 80,
    "bugReport": 40,
}

ACTION_DESCRIPTIONS = {
    "questionPost": "Posted a question in community",
    "answerPost": "Provided an answer",
    "bestAnswer": "Answer marked as best by community",
    "commentPost": "Added a helpful comment",
    "helpfulVote": "Received a helpful vote",
    "expertVerification": "Verified by community expert",
    "profileComplete": "Completed profile setup",
    "dogProfileAdd": "Added dog profile",
    "photoUpload": "Uploaded photo",
    "storyShare": "Shared a story",
    "reviewWrite": "Wrote a review",
    "healthLogEntry": "Logged health data",
    "medicationReminder": "Set medication reminder",
    "vetVisitLog": "Logged vet visit",
    "vaccinationUpdate": "Updated vaccination record",
    "healthMilestone": "Achieved health milestone",
    "forumParticipation": "Participated in forum discussion",
    "eventAttendance": "Attended community event",
    "workshopCompletion": "Completed workshop",
    "mentorshipSession": "Participated in mentorship",
    "friendConnect": "Connected with another member",
    "playDateOrganize": "Organized a play date",
    "communityHelp": "Helped community member",
    "referralSuccess": "Successfully referred new member",
    "dailyLogin": "Daily login bonus",
    "weeklyStreak": "Weekly streak bonus",
    "monthlyActive": "Monthly activity bonus",
    "expertAnswer": "Provided expert-level answer",
    "moderatorAction": "Performed moderation action",
    "contentCreation": "Created valuable content",
    "communityGuide": "Created community guide",
    "bugReport": "Reported a bug",
}

CONTEXT_MULTIPLIERS = {
    "new_user": 2.0,
    "premium_user": 1.5,
    "expert_user": 1.3,
    "community_leader": 1.4,
    "festival_event": 2.0,
    "weekend_bonus": 1.2,
    "birthday_month": 1.5,
}

LEVEL_THRESHOLDS = (
    0, 100, 250, 500, 1000, 1750, 2750, 4000, 5500, 7500,
    10000, 13000, 16500, 20500, 25000, 30000, 36000, 43000, 51000, 60000,
)

REGIONAL_BONUSES = {
    "major_cities": [
        "Mumbai", "Delhi", "Bangalore", "Hyderabad",
        "Pune", "Chennai", "Kolkata", "Ahmedabad",
    ],
    "city_bonus": 1.1,
    "festivals": {
        "Diwali": 2.0,
        "Holi": 1.8,
        "Dussehra": 1.6,
        "Ganesh Chaturthi": 1.7,
        "Navratri": 1.5,
        "Karva Chauth": 1.3,
        "Raksha Bandhan": 1.4,
    },
    "native_breeds": [
        "indian-pariah",
        "rajapalayam",
        "mudhol-hound",
        "rampur-greyhound",
        "chippiparai",
    ],
    "breed_bonus": 1.2,
    # Approximate; a proper lunar calendar would replace this
    "festival_calendar": {
        "Diwali": (10, 15),
        "Holi": (3, 15),
        "Dussehra": (10, 5),
        "Ganesh Chaturthi": (8, 20),
    },
    "festival_window_days": 2,
}


def _achievement(
    id, name, description, icon, category, points_required, condition, rarity, **extra
):
    type_, target, metric = condition
    return {
        "id": id,
        "name": name,
        "description": description,
        "icon": icon,
        "category": category,
        "points_required": points_required,
        "condition": {"type": type_, "target": target, "metric": metric},
        "rarity": rarity,
        **extra,
    }


ACHIEVEMENTS = [
    # Community engagement
    _achievement(
        "first_paw_print", "First Paw Print", "Posted your first question or answer",
        "🐾", "community", 50, ("count", 1, "posts"), "common",
    ),
    _achievement(
        "helpful_member", "Helpful Member", "Received 25 helpful votes from community",
        "🤝", "community", 200, ("count", 25, "helpful_votes"), "rare",
    ),
    _achievement(
        "expert_recognition", "Expert Recognition", "Had 10 answers marked as best answers",
        "⭐", "expertise", 500, ("count", 10, "best_answers"), "epic",
    ),
    _achievement(
        "community_champion", "Community Champion", "Made 100 contributions to the community",
        "🏆", "community", 1000, ("count", 100, "total_contributions"), "legendary",
    ),
    # Dog care
    _achievement(
        "dog_parent_dedication", "Dog Parent Dedication", "Added complete profiles for 3 dogs",
        "🐕", "dog_care", 300, ("count", 3, "dog_profiles"), "common",
    ),
    _achievement(
        "health_advocate", "Health Advocate", "Logged health data for 30 days straight",
        "🏥", "health", 600, ("streak", 30, "health_log_streak"), "rare",
    ),
    _achievement(
        "vaccination_guardian", "Vaccination Guardian",
        "Kept vaccination records updated for all dogs",
        "💉", "health", 400, ("special", 1, "vaccination_complete"), "rare",
    ),
    # Social
    _achievement(
        "social_butterfly", "Social Butterfly", "Connected with 20 fellow dog parents",
        "🦋", "social", 400, ("count", 20, "friend_connections"), "rare",
    ),
    _achievement(
        "play_date_organizer", "Play Date Organizer", "Organized 5 successful play dates",
        "🎾", "social", 250, ("count", 5, "play_dates_organized"), "common",
    ),
    # Streaks
    _achievement(
        "consistent_contributor", "Consistent Contributor", "Maintained a 30-day activity streak",
        "🔥", "engagement", 800, ("streak", 30, "daily_activity"), "epic",
    ),
    _achievement(
        "loyalty_legend", "Loyalty Legend", "Logged in for 100 consecutive days",
        "👑", "engagement", 1500, ("streak", 100, "daily_login"), "legendary",
    ),
    # Indian context
    _achievement(
        "desi_dog_expert", "Desi Dog Expert", "Shared expertise about Indian dog breeds",
        "🇮🇳", "expertise", 750, ("count", 10, "indian_breed_posts"), "epic",
        regional=True,
    ),
    _achievement(
        "festival_celebrant", "Festival Celebrant", "Participated during 3 major Indian festivals",
        "🎉", "cultural", 500, ("count", 3, "festival_participation"), "rare",
        regional=True,
    ),
    _achievement(
        "city_ambassador", "City Ambassador", "Became top contributor in your city",
        "🏙️", "regional", 1200, ("special", 1, "city_top_contributor"), "legendary",
        regional=True,
    ),
    # Special milestones
    _achievement(
        "woofadaar_veteran", "Woofadaar Veteran", "Been part of community for 1 year",
        "🎖️", "milestone", 2000, ("milestone", 365, "days_member"), "legendary",
    ),
    _achievement(
        "content_creator", "Content Creator", "Created valuable guides and stories",
        "📝", "contribution", 600, ("count", 15, "content_created"), "rare",
    ),
    _achievement(
        "mentor_guide", "Mentor Guide", "Helped 10 new members get started",
        "🧭", "mentorship", 800, ("count", 10, "mentorship_sessions"), "epic",
    ),
    # Hidden
    _achievement(
        "night_owl", "Night Owl", "Active between 11 PM - 5 AM for 10 days",
        "🦉", "behavior", 0, ("count", 10, "night_activity_days"), "rare",
        hidden=True, points_reward=200,
        discovery_hint="Some of the best conversations happen when most are sleeping...",
    ),
    _achievement(
        "festive_spirit", "Festive Spirit",
        "Participate during all major Indian festivals in a year",
        "🎆", "cultural", 0, ("count", 5, "festival_participation"), "epic",
        hidden=True, regional=True, points_reward=500,
        discovery_hint="Celebrations are better when shared with the community...",
    ),
    _achievement(
        "mentor_soul", "Mentor Soul", "Help 5 new users get their first 100 points",
        "🧭", "mentorship", 0, ("count", 5, "mentored_users_to_milestone"), "epic",
        hidden=True, points_reward=400,
        discovery_hint="The best teachers create more teachers...",
    ),
    _achievement(
        "early_bird", "Early Bird", "First to comment on 20 posts within 5 minutes of posting",
        "🐦", "engagement", 0, ("count", 20, "early_comments"), "rare",
        hidden=True, points_reward=150,
        discovery_hint="The early bird catches the worm... and the conversation!",
    ),
    _achievement(
        "weekend_warrior", "Weekend Warrior",
        "Most active community member for 4 consecutive weekends",
        "⚔️", "engagement", 0, ("streak", 4, "consecutive_weekend_streaks"), "epic",
        hidden=True, points_reward=300,
        discovery_hint="Who says weekends are for rest?",
    ),
    _achievement(
        "dog_whisperer", "Dog Whisperer",
        "Successfully predict dog behavior patterns based on health data",
        "🔮", "expertise", 0, ("count", 10, "accurate_behavior_predictions"), "legendary",
        hidden=True, points_reward=600,
        discovery_hint="Understanding your dog goes beyond words...",
    ),
]


def _chain_level(level, id, name, description, icon, category, condition, rarity,
                 points_reward):
    return {
        **_achievement(id, name, description, icon, category, 0, condition, rarity),
        "level": level,
        "points_reward": points_reward,
    }


CHAINS = [
    {
        "id": "community_expert_chain",
        "name": "Community Expert Journey",
        "description": "Progress from newcomer to community expert",
        "category": "community",
        "total_levels": 5,
        "levels": [
            _chain_level(
                1, "ce_first_steps", "First Paw Print",
                "Post your first question or answer", "👶", "community",
                ("count", 1, "posts"), "common", 25,
            ),
            _chain_level(
                2, "ce_getting_involved", "Active Member",
                "Actively participate for 7 days", "🚶", "community",
                ("streak", 7, "active_days"), "common", 75,
            ),
            _chain_level(
                3, "ce_community_helper", "Community Helper",
                "Help others with 25 helpful answers", "🤝", "community",
                ("count", 25, "helpful_answers"), "rare", 150,
            ),
            _chain_level(
                4, "ce_trusted_advisor", "Trusted Advisor",
                "Become a go-to expert in your area", "🎓", "community",
                ("count", 15, "best_answers"), "epic", 300,
            ),
            _chain_level(
                5, "ce_community_legend", "Community Legend",
                "Achieve legendary status in the community", "👑", "community",
                ("count", 1000, "total_contributions"), "legendary", 1000,
            ),
        ],
    },
    {
        "id": "dog_care_master_chain",
        "name": "Dog Care Mastery",
        "description": "Master the art of caring for your furry friend",
        "category": "dog_care",
        "total_levels": 4,
        "levels": [
            _chain_level(
                1, "dcm_new_parent", "New Dog Parent",
                "Add your first dog profile", "🐕", "dog_care",
                ("count", 1, "dog_profiles"), "common", 50,
            ),
            _chain_level(
                2, "dcm_health_tracker", "Health Tracker",
                "Log health data for 30 consecutive days", "📊", "dog_care",
                ("streak", 30, "health_log_streak"), "rare", 200,
            ),
            _chain_level(
                3, "dcm_wellness_advocate", "Wellness Advocate",
                "Maintain perfect vaccination and health records", "🏥", "dog_care",
                ("count", 10, "health_milestones"), "epic", 400,
            ),
            _chain_level(
                4, "dcm_care_expert", "Dog Care Expert",
                "Share your expertise and help other parents", "🎖️", "dog_care",
                ("count", 5, "care_guides_created"), "legendary", 750,
            ),
        ],
    },
]

DEFAULT_CATALOG = {
    "actions": ACTION_POINTS,
    "action_descriptions": ACTION_DESCRIPTIONS,
    "multipliers": CONTEXT_MULTIPLIERS,
    "level_thresholds": LEVEL_THRESHOLDS,
    "regional": REGIONAL_BONUSES,
    "achievements": ACHIEVEMENTS,
    "chains": CHAINS,
}
