"""
Job Recommender - Matches job seekers to job postings

This application:
1. Indexes job titles and required skills for prefix search
2. Models locations and roads to answer proximity and route queries
3. Scores jobs by skill match, distance, salary and experience fit
4. Ranks the best opportunities for each user
5. Analyzes skill gaps towards a target job
"""

__version__ = "1.0.0"
__author__ = "Job Recommender"
