# Folder in charge of Firestore client construction
