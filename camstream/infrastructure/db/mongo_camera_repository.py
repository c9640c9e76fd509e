# Standard library imports
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId

# Local application imports
from ...domain.repositories.camera_repository import CameraRepository
from ...domain.models.access_right import AccessRight, AccessToken
from ...domain.models.camera import Camera, Vendor, VendorModel
from ...domain.models.user import User
from ...domain.constants import CameraFields, AccessFields, VendorFields
from .mongo_connection import (
    get_camera_collection,
    get_user_collection,
    get_vendor_collection,
    get_vendor_model_collection,
    get_access_token_collection,
    get_access_right_collection,
    get_camera_share_collection,
)
from .mongo_ids import id_filter, document_id
from .mongo_user_repository import document_to_user


class MongoCameraRepository(CameraRepository):
    """
    MongoDB implementation of CameraRepository.

    Associations live in their own collections (users, vendor_models,
    vendors, access_tokens, access_rights, camera_shares) and are hydrated
    with follow-up queries.
    """

    def __init__(
        self,
        camera_collection: Optional[AsyncIOMotorCollection] = None,
        user_collection: Optional[AsyncIOMotorCollection] = None,
        vendor_collection: Optional[AsyncIOMotorCollection] = None,
        vendor_model_collection: Optional[AsyncIOMotorCollection] = None,
        access_token_collection: Optional[AsyncIOMotorCollection] = None,
        access_right_collection: Optional[AsyncIOMotorCollection] = None,
        camera_share_collection: Optional[AsyncIOMotorCollection] = None,
    ) -> None:
        self.camera_collection = camera_collection if camera_collection is not None else get_camera_collection()
        self.user_collection = user_collection if user_collection is not None else get_user_collection()
        self.vendor_collection = vendor_collection if vendor_collection is not None else get_vendor_collection()
        self.vendor_model_collection = (
            vendor_model_collection if vendor_model_collection is not None else get_vendor_model_collection()
        )
        self.access_token_collection = (
            access_token_collection if access_token_collection is not None else get_access_token_collection()
        )
        self.access_right_collection = (
            access_right_collection if access_right_collection is not None else get_access_right_collection()
        )
        self.camera_share_collection = (
            camera_share_collection if camera_share_collection is not None else get_camera_share_collection()
        )

    async def find_by_exid(self, exid: str) -> Optional[Camera]:
        """
        Find camera by external ID

        Args:
            exid: The camera external ID

        Returns:
            Camera domain model (no associations) if found, None otherwise
        """
        if not exid:
            return None

        try:
            document = await self.camera_collection.find_one({CameraFields.EXID: exid})
        except Exception as e:
            raise RuntimeError(f"Error finding camera by exid: {str(e)}")

        if document is None:
            return None
        return self._document_to_camera(document)

    async def find_by_exid_with_associations(self, exid: str) -> Optional[Camera]:
        """
        Find camera by external ID with owner, vendor model/vendor and all
        access rights (each with its access token)
        """
        if not exid:
            return None

        try:
            document = await self.camera_collection.find_one({CameraFields.EXID: exid})
            if document is None:
                return None

            camera = self._document_to_camera(document)
            camera.owner = await self._load_user(camera.owner_id)
            camera.vendor_model = await self._load_vendor_model(document.get(CameraFields.MODEL_ID))
            camera.access_rights = await self._load_access_rights(camera.id)
            return camera
        except Exception as e:
            raise RuntimeError(f"Error finding camera with associations: {str(e)}")

    async def find_owned_by(self, user: User) -> List[Camera]:
        """
        Find all cameras owned by a user

        Access rights are restricted to the user's active token.
        """
        if not user or not user.id:
            return []

        try:
            cursor = self.camera_collection.find({CameraFields.OWNER_ID: user.id})
            return await self._hydrate_for_user(cursor, user)
        except Exception as e:
            raise RuntimeError(f"Error listing cameras for owner: {str(e)}")

    async def find_shared_with(self, user: User) -> List[Camera]:
        """
        Find all cameras shared with a user

        Access rights are restricted to the user's active token.
        """
        if not user or not user.id:
            return []

        try:
            share_cursor = self.camera_share_collection.find({AccessFields.USER_ID: user.id})
            camera_ids = [share[AccessFields.CAMERA_ID] async for share in share_cursor]
            if not camera_ids:
                return []

            cursor = self.camera_collection.find(self._ids_query(camera_ids))
            return await self._hydrate_for_user(cursor, user)
        except Exception as e:
            raise RuntimeError(f"Error listing cameras shared with user: {str(e)}")

    async def find_share_users(self, camera: Camera) -> List[User]:
        """
        Find every user the camera is shared with

        Args:
            camera: Camera domain model (must have an internal ID)

        Returns:
            List of User domain models
        """
        if not camera or not camera.id:
            return []

        try:
            share_cursor = self.camera_share_collection.find({AccessFields.CAMERA_ID: camera.id})
            user_ids = [share[AccessFields.USER_ID] async for share in share_cursor]
            if not user_ids:
                return []

            users = []
            async for document in self.user_collection.find(self._ids_query(user_ids)):
                users.append(document_to_user(document))
            return users
        except Exception as e:
            raise RuntimeError(f"Error listing users a camera is shared with: {str(e)}")

    async def _hydrate_for_user(self, cursor, user: User) -> List[Camera]:
        token = await self._active_token_for(user.id)
        token_ids = [token.id] if token else []

        cameras = []
        async for document in cursor:
            camera = self._document_to_camera(document)
            camera.owner = await self._load_user(camera.owner_id)
            camera.vendor_model = await self._load_vendor_model(document.get(CameraFields.MODEL_ID))
            camera.access_rights = await self._load_access_rights(camera.id, token_ids=token_ids)
            cameras.append(camera)
        return cameras

    async def _active_token_for(self, user_id: str) -> Optional[AccessToken]:
        document = await self.access_token_collection.find_one(
            {AccessFields.USER_ID: user_id, AccessFields.IS_REVOKED: {"$ne": True}}
        )
        if document is None:
            return None
        return self._document_to_token(document)

    async def _load_user(self, user_id: Optional[str]) -> Optional[User]:
        if not user_id:
            return None
        document = await self.user_collection.find_one(id_filter(user_id))
        return document_to_user(document) if document else None

    async def _load_vendor_model(self, model_id: Optional[str]) -> Optional[VendorModel]:
        if not model_id:
            return None

        document = await self.vendor_model_collection.find_one(id_filter(str(model_id)))
        if document is None:
            return None

        vendor = None
        vendor_id = document.get(VendorFields.VENDOR_ID)
        if vendor_id:
            vendor_document = await self.vendor_collection.find_one(id_filter(str(vendor_id)))
            if vendor_document:
                vendor = Vendor(
                    id=document_id(vendor_document),
                    exid=vendor_document.get(VendorFields.EXID, ""),
                    name=vendor_document.get(VendorFields.NAME, ""),
                )

        return VendorModel(
            id=document_id(document),
            name=document.get(VendorFields.NAME, ""),
            config=document.get(VendorFields.CONFIG) or {},
            vendor=vendor,
        )

    async def _load_access_rights(
        self,
        camera_id: Optional[str],
        token_ids: Optional[List[str]] = None,
    ) -> List[AccessRight]:
        """
        Load access rights for a camera, each with its access token

        Args:
            camera_id: Internal camera ID
            token_ids: When given, only rights granted to these tokens
        """
        if not camera_id:
            return []

        query: Dict[str, Any] = {AccessFields.CAMERA_ID: camera_id}
        if token_ids is not None:
            query[AccessFields.TOKEN_ID] = {"$in": token_ids}

        rights_documents = [document async for document in self.access_right_collection.find(query)]
        wanted_token_ids = {document.get(AccessFields.TOKEN_ID) for document in rights_documents}
        wanted_token_ids.discard(None)

        tokens: Dict[str, AccessToken] = {}
        if wanted_token_ids:
            async for document in self.access_token_collection.find(self._ids_query(list(wanted_token_ids))):
                token = self._document_to_token(document)
                tokens[token.id] = token

        return [
            AccessRight(
                camera_id=camera_id,
                right=document.get(AccessFields.RIGHT, ""),
                token=tokens.get(document.get(AccessFields.TOKEN_ID)),
            )
            for document in rights_documents
        ]

    @staticmethod
    def _ids_query(ids: List[str]) -> Dict[str, Any]:
        """Match documents whose _id or custom "id" is in ids"""
        object_ids = []
        for value in ids:
            try:
                object_ids.append(ObjectId(value))
            except (InvalidId, ValueError, TypeError):
                continue
        return {"$or": [{"_id": {"$in": object_ids}}, {"id": {"$in": list(ids)}}]}

    @staticmethod
    def _document_to_token(document: Dict[str, Any]) -> AccessToken:
        return AccessToken(
            id=document_id(document),
            user_id=document.get(AccessFields.USER_ID, ""),
            is_revoked=bool(document.get(AccessFields.IS_REVOKED, False)),
        )

    def _document_to_camera(self, document: Dict[str, Any]) -> Camera:
        """
        Convert MongoDB document to Camera domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            Camera domain model without associations
        """
        if not document:
            raise ValueError("Invalid document: document is None or empty")

        location = document.get(CameraFields.LOCATION)
        if isinstance(location, dict):
            location = (location.get("lng", 0), location.get("lat", 0))
        elif isinstance(location, (list, tuple)) and len(location) == 2:
            location = (location[0], location[1])
        else:
            location = None

        return Camera(
            id=document_id(document),
            exid=document.get(CameraFields.EXID, ""),
            name=document.get(CameraFields.NAME, ""),
            owner_id=document.get(CameraFields.OWNER_ID),
            config=document.get(CameraFields.CONFIG) or {},
            timezone=document.get(CameraFields.TIMEZONE),
            is_public=bool(document.get(CameraFields.IS_PUBLIC, False)),
            is_online=bool(document.get(CameraFields.IS_ONLINE, False)),
            last_polled_at=document.get(CameraFields.LAST_POLLED_AT),
            last_online_at=document.get(CameraFields.LAST_ONLINE_AT),
            mac_address=document.get(CameraFields.MAC_ADDRESS),
            location=location,
        )
